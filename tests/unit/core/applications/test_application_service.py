"""
Unit tests for ApplicationService queries and recruiter decisions.
"""
import unittest
from datetime import datetime, timedelta, timezone

from core.applications import ApplicationService
from core.errors import ApplicationNotFoundError, InvalidInputError
from core.models import ApplicationStatus
from core.store import APPLICATIONS
from tests.fixtures.jobs import make_application, store_application
from tests.mocks.store_mocks import InMemoryDocumentStore

T0 = datetime(2026, 2, 1, tzinfo=timezone.utc)


class TestApplicationService(unittest.TestCase):

    def setUp(self):
        self.store = InMemoryDocumentStore()
        self.service = ApplicationService(self.store)

    def test_get_unknown_raises(self):
        with self.assertRaises(ApplicationNotFoundError):
            self.service.get("nope")

    def test_list_for_candidate_newest_first(self):
        store_application(self.store, make_application("c1", "j1", created_at=T0))
        store_application(self.store, make_application("c1", "j2", created_at=T0 + timedelta(hours=1)))
        store_application(self.store, make_application("c2", "j1", created_at=T0))

        applications = self.service.list_for_candidate("c1")
        self.assertEqual([a.job_id for a in applications], ["j2", "j1"])

    def test_list_for_job_best_match_first(self):
        store_application(self.store, make_application("c1", "j1", match_score=71))
        store_application(self.store, make_application("c2", "j1", match_score=93))
        store_application(self.store, make_application("c3", "j1", match_score=85))

        applications = self.service.list_for_job("j1")
        self.assertEqual([a.candidate_id for a in applications], ["c2", "c3", "c1"])

    def test_accept(self):
        application = store_application(self.store, make_application())
        updated = self.service.update_status(application.id, "accepted")

        self.assertEqual(updated.status, ApplicationStatus.ACCEPTED)
        self.assertEqual(self.store.get(APPLICATIONS, application.id)['status'], "accepted")

    def test_same_status_is_noop(self):
        application = store_application(self.store, make_application(status=ApplicationStatus.REJECTED))
        updated = self.service.update_status(application.id, ApplicationStatus.REJECTED)
        self.assertEqual(updated.status, ApplicationStatus.REJECTED)
        self.assertIsNone(self.store.get(APPLICATIONS, application.id).get('updatedAt'))

    def test_pending_is_not_a_decision(self):
        application = store_application(self.store, make_application())
        with self.assertRaises(InvalidInputError):
            self.service.update_status(application.id, "pending")

    def test_unknown_status(self):
        application = store_application(self.store, make_application())
        with self.assertRaises(InvalidInputError):
            self.service.update_status(application.id, "maybe")

    def test_update_unknown_application(self):
        with self.assertRaises(ApplicationNotFoundError):
            self.service.update_status("nope", "accepted")


if __name__ == "__main__":
    unittest.main()
