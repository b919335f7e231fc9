from dataclasses import dataclass
from typing import Optional
import logging

from core.applications import ApplicationRecorder, ApplicationService
from core.config_loader import AppConfig, LlmConfig
from core.feed import JobFeedSupplier
from core.llm import LLMProvider, OpenAIService
from core.scorer import MatchScoreRefiner, ScoreRefinementService, build_scorer
from core.scorer.service import load_profile
from core.store import DocumentStore
from core.swipe import GestureInterpreter, SwipeSession
from core.tasks import TaskRunner, build_task_runner

logger = logging.getLogger(__name__)


@dataclass
class AppContext:
    """Application context container that holds all wired dependencies.

    Everything the swipe pipeline needs is built here once and passed
    explicitly; no component reaches for a global store or client.
    """
    config: AppConfig
    store: DocumentStore
    task_runner: TaskRunner
    feed_supplier: JobFeedSupplier
    recorder: ApplicationRecorder
    applications: ApplicationService
    refinement_service: Optional[ScoreRefinementService] = None

    @classmethod
    def build(
        cls,
        config: AppConfig,
        store: Optional[DocumentStore] = None,
        llm: Optional[LLMProvider] = None
    ) -> "AppContext":
        """Build an AppContext from config.

        Args:
            config: Loaded application configuration
            store: Document store; defaults to the SQL store on config.database.url
            llm: Completion provider; defaults to OpenAIService from config.llm

        Returns:
            Fully wired AppContext instance
        """
        if store is None:
            store = cls.build_sql_store(config.database.url)

        task_runner = build_task_runner(config.swipe)

        refinement_service = None
        if config.refiner.enabled:
            if llm is None:
                llm = cls._build_ai_service(config.llm)
            refiner = MatchScoreRefiner(
                llm,
                retries=config.refiner.retries,
                backoff_seconds=config.refiner.backoff_seconds,
            )
            refinement_service = ScoreRefinementService(store, refiner)
        else:
            logger.info("Match score refinement disabled via config")

        recorder = ApplicationRecorder(
            store,
            build_scorer(config.scoring),
            task_runner=task_runner,
            refinement=refinement_service,
            retry_attempts=config.recorder.retry_attempts,
            backoff_seconds=config.recorder.backoff_seconds,
            persist_demo_jobs=config.recorder.persist_demo_jobs,
        )

        return cls(
            config=config,
            store=store,
            task_runner=task_runner,
            feed_supplier=JobFeedSupplier(store),
            recorder=recorder,
            applications=ApplicationService(store),
            refinement_service=refinement_service,
        )

    @staticmethod
    def _build_ai_service(llm_config: LlmConfig) -> OpenAIService:
        """Build OpenAI service from LLM configuration."""
        return OpenAIService(
            api_key=llm_config.api_key,
            base_url=llm_config.base_url,
            model=llm_config.model,
            temperature=llm_config.temperature,
            timeout_seconds=llm_config.timeout_seconds,
        )

    @staticmethod
    def build_sql_store(database_url: str) -> DocumentStore:
        """SqlDocumentStore on ``database_url``; tables are created if missing."""
        from database.database import make_engine, make_session_factory, init_db
        from database.document_store import SqlDocumentStore

        engine = make_engine(database_url)
        init_db(engine)
        return SqlDocumentStore(make_session_factory(engine))

    def start_session(self, candidate_id: str) -> SwipeSession:
        """Create a swipe session for ``candidate_id`` and load its feed."""
        session = SwipeSession(
            candidate_id,
            recorder=self.recorder,
            interpreter=GestureInterpreter(
                distance_threshold=self.config.swipe.distance_threshold,
                velocity_threshold=self.config.swipe.velocity_threshold,
            ),
            profile=load_profile(self.store, candidate_id),
            undo_retracts_application=self.config.swipe.undo_retracts_application,
        )
        session.initialize(self.feed_supplier.get_feed(candidate_id))
        return session

    def shutdown(self) -> None:
        self.task_runner.shutdown()
