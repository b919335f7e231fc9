import contextlib
import logging

from sqlalchemy.exc import IntegrityError, OperationalError, InterfaceError
from sqlalchemy.orm import sessionmaker

from core.errors import StoreUnavailableError
from database.repositories import JobRepository, ApplicationRepository, ProfileRepository

logger = logging.getLogger(__name__)


class UnitOfWork:
    """Repositories bound to one Session."""

    def __init__(self, session):
        self.session = session
        self.jobs = JobRepository(session)
        self.applications = ApplicationRepository(session)
        self.profiles = ProfileRepository(session)


@contextlib.contextmanager
def store_uow(session_factory: sessionmaker):
    """Per-unit-of-work transaction scope.

    Yields a UnitOfWork bound to a fresh Session. Commits on success,
    rolls back on exception, always closes. Connection-level failures are
    re-raised as StoreUnavailableError so callers can retry them.

    Usage:
        with store_uow(session_factory) as uow:
            app = uow.applications.get(app_id)
        # commit happens automatically on successful exit
    """
    session = session_factory()
    try:
        yield UnitOfWork(session)
        session.commit()
    except IntegrityError:
        session.rollback()
        raise
    except (OperationalError, InterfaceError) as e:
        session.rollback()
        logger.warning(f"Document store unavailable: {e}")
        raise StoreUnavailableError(str(e)) from e
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()
