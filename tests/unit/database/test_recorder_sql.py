"""
End-to-end recording against the SQL store: a session swipes right and the
application lands in the database exactly once.
"""
import pytest

from core.app_context import AppContext
from core.models import ApplicationStatus
from core.store import APPLICATIONS
from tests.fixtures.jobs import make_job, make_profile, store_job, store_profile
from tests.mocks.store_mocks import ScriptedLLMProvider

pytestmark = pytest.mark.db


@pytest.fixture
def context(sql_store, inline_config):
    llm = ScriptedLLMProvider({"refinedMatchScore": 91, "reasoning": "good fit"})
    ctx = AppContext.build(inline_config, store=sql_store, llm=llm)
    yield ctx
    ctx.shutdown()


def test_right_swipe_persists_refined_application(context, sql_store):
    store_job(sql_store, make_job("j1", required_skills=["Python"]))
    store_profile(sql_store, make_profile("c1", skills=["python"]))

    session = context.start_session("c1")
    assert session.top.id == "j1"
    record = session.commit("right")

    application = record.application.result()
    doc = sql_store.get(APPLICATIONS, application.id)
    assert doc['status'] == ApplicationStatus.PENDING.value
    # Initial skill overlap was 100, refinement wrote 91
    assert application.match_score == 100.0
    assert doc['matchScore'] == 91.0


def test_applied_job_leaves_feed(context, sql_store):
    store_job(sql_store, make_job("j1"))
    store_job(sql_store, make_job("j2"))

    session = context.start_session("c1")
    session.commit("right")
    session.close()

    remaining = context.feed_supplier.get_feed("c1")
    assert len(remaining) == 1
    assert remaining[0].id != session.history[0].job.id
