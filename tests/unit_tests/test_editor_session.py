import asyncio
import json

import httpx
import pytest

from dynamic_draft.editor.persistence import RESUME_DATA_KEY, PersistenceAdapter
from dynamic_draft.editor.scheduling import AsyncioScheduler, ManualScheduler, ThreadingScheduler
from dynamic_draft.editor.session import EditorSession
from dynamic_draft.models.schemas.grammar import GrammarSuggestion
from dynamic_draft.models.schemas.resume import Section
from dynamic_draft.services.resume_api_client import ResumeApiClient
from dynamic_draft.services.templates import default_document, get_template, sample_document
from dynamic_draft.utilities.exceptions.editor import PersistenceUnavailable
from tests.unit_tests.fakes import FakeLanguageTool, language_tool_match


def make_session(persistence, scheduler, **kwargs):
    kwargs.setdefault("language_tool", FakeLanguageTool())
    return EditorSession(persistence, scheduler=scheduler, snapshot_delay=1.0, grammar_debounce=0.3, **kwargs)


class BrokenStore:
    def get(self, key):
        return None

    def set(self, key, value):
        raise PersistenceUnavailable("disk full")

    def delete(self, key):
        return None


def test_session_starts_from_stored_snapshot(persistence, scheduler):
    persistence.save(sample_document())
    assert make_session(persistence, scheduler).document == sample_document()


def test_edits_are_snapshotted_after_a_quiet_period(persistence, store, scheduler):
    session = make_session(persistence, scheduler)

    session.set_field("personalInfo.name", "Ada")
    scheduler.advance(0.5)
    session.set_field("personalInfo.name", "Ada Lovelace")
    scheduler.advance(0.9)
    assert RESUME_DATA_KEY not in store.data
    assert session.unsaved

    scheduler.advance(0.2)
    assert json.loads(store.data[RESUME_DATA_KEY])["personalInfo"]["name"] == "Ada Lovelace"
    assert not session.unsaved


def test_rejected_edit_changes_nothing(persistence, store, scheduler):
    session = make_session(persistence, scheduler)
    before = session.document

    result = session.set_field("education.7.degree", "BSc")
    scheduler.advance(5)

    assert not result.ok
    assert session.document is before
    assert RESUME_DATA_KEY not in store.data


def test_edit_schedules_local_grammar_check(persistence, scheduler):
    session = make_session(persistence, scheduler)

    session.set_field("experience.0.company", "I is a engineer")
    assert session.overlay.suggestions("experience.0.company") == []

    scheduler.advance(0.3)
    assert [s.suggestion for s in session.overlay.suggestions("experience.0.company")] == ["I am", "an"]


def test_apply_suggestion_rewrites_field_and_drops_it(persistence, scheduler):
    session = make_session(persistence, scheduler)
    session.set_field("experience.0.company", "I is a engineer")
    scheduler.advance(0.3)
    article = session.overlay.suggestions("experience.0.company")[1]

    result = session.apply_suggestion(article)

    assert result.ok
    assert session.document.experience[0].company == "I is an engineer"
    assert article not in session.overlay.suggestions("experience.0.company")


def test_apply_suggestion_falls_back_to_first_occurrence(persistence, scheduler):
    session = make_session(persistence, scheduler)
    session.set_field("projects.0.details.0", "Wrote teh docs")
    moved = GrammarSuggestion(
        field_path="projects.0.details.0", original="teh", suggestion="the", rule="spelling", offset=0, length=3
    )

    assert session.apply_suggestion(moved).ok
    assert session.document.projects[0].details[0] == "Wrote the docs"


def test_stale_suggestion_is_rejected(persistence, scheduler):
    session = make_session(persistence, scheduler)
    session.set_field("experience.0.company", "I is")
    scheduler.advance(0.3)
    suggestion = session.overlay.suggestions("experience.0.company")[0]
    session.set_field("experience.0.company", "Acme")

    result = session.apply_suggestion(suggestion)

    assert not result.ok
    assert session.document.experience[0].company == "Acme"


@pytest.mark.asyncio
async def test_remote_grammar_check_through_session(persistence, scheduler):
    remote = FakeLanguageTool(matches=[language_tool_match(6, 3, "Wrote teh docs", "the", issue_type="misspelling")])
    session = make_session(persistence, scheduler, language_tool=remote)
    session.set_field("projects.0.details.0", "Wrote teh docs")

    suggestions = await session.check_grammar("projects.0.details.0")

    assert remote.calls == ["Wrote teh docs"]
    assert [s.original for s in suggestions] == ["teh"]
    assert await session.check_grammar("projects.0.details.5") == []


def test_removing_an_entry_clears_shifted_overlays(persistence, scheduler):
    session = make_session(persistence, scheduler, document=sample_document())
    session.set_field("experience.0.company", "I is")
    session.set_field("experience.2.company", "I is")
    scheduler.advance(0.3)

    session.remove_list_item(Section.EXPERIENCE, 1)

    assert session.overlay.suggestions("experience.0.company")
    assert session.overlay.suggestions("experience.2.company") == []
    assert len(session.document.experience) == 2


def test_renaming_skill_category_moves_overlay(persistence, scheduler):
    session = make_session(persistence, scheduler)
    session.set_field("skills.languages", "I is fluent")
    scheduler.advance(0.3)
    assert session.overlay.suggestions("skills.languages")

    result = session.rename_skill_category("languages", "Spoken Languages")
    scheduler.advance(0.3)

    assert result.ok
    assert list(session.document.skills)[-1] == "Spoken Languages"
    assert session.overlay.suggestions("skills.languages") == []
    assert session.overlay.suggestions("skills.Spoken Languages")


def test_reset_and_template_clear_overlay(persistence, scheduler):
    session = make_session(persistence, scheduler)
    session.set_field("experience.0.company", "I is")
    scheduler.advance(0.3)

    session.load_template(get_template("creative"))
    assert session.overlay.snapshot() == {}
    assert session.document.personal_info.name == "Sam Rivera"

    session.load_sample()
    assert session.document == sample_document()
    session.reset()
    assert session.document == default_document()


def test_move_section_is_visible_in_sections(persistence, scheduler):
    session = make_session(persistence, scheduler)
    session.move_section(4, 0)
    assert session.sections()[0][0] is Section.SKILLS


def test_save_now_and_close_write_immediately(persistence, store, scheduler):
    session = make_session(persistence, scheduler)
    session.set_field("personalInfo.email", "ada@example.com")
    assert session.save_now()
    assert "ada@example.com" in store.data[RESUME_DATA_KEY]

    session.set_field("personalInfo.email", "lovelace@example.com")
    session.close()
    assert "lovelace@example.com" in store.data[RESUME_DATA_KEY]


def test_storage_failure_keeps_document_in_memory(scheduler):
    session = make_session(PersistenceAdapter(BrokenStore()), scheduler)

    session.set_field("personalInfo.name", "Ada")
    scheduler.advance(1.0)

    assert session.document.personal_info.name == "Ada"
    assert session.unsaved
    assert session.save_now() is False


@pytest.mark.asyncio
async def test_save_remote_creates_then_updates(persistence, scheduler):
    requests = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append((request.method, request.url.path, json.loads(request.content or b"null")))
        assert request.headers["Authorization"] == "Bearer token"
        return httpx.Response(201 if request.method == "POST" else 200, json={"id": 42})

    session = make_session(persistence, scheduler, document=sample_document())
    async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as http_client:
        client = ResumeApiClient("token", base_url="https://api.test/api", http_client=http_client)
        created = await session.save_remote(client, template="professional")
        session.set_field("personalInfo.name", "Jake R.")
        updated = await session.save_remote(client)

    assert created.ok and updated.ok
    assert session.resume_id == 42
    assert [(method, path) for method, path, _ in requests] == [("POST", "/api/resumes"), ("PATCH", "/api/resumes/42")]
    assert requests[0][2]["template"] == "professional"
    assert requests[1][2]["content"]["personalInfo"]["name"] == "Jake R."


@pytest.mark.asyncio
async def test_save_remote_failure_keeps_local_state(persistence, scheduler):
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(500, json={"detail": "boom"})

    session = make_session(persistence, scheduler)
    async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as http_client:
        client = ResumeApiClient("token", base_url="https://api.test/api", http_client=http_client)
        result = await session.save_remote(client)

    assert not result.ok
    assert "500" in result.error
    assert session.resume_id is None


@pytest.mark.asyncio
async def test_api_client_reports_transport_errors():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("unreachable", request=request)

    async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as http_client:
        client = ResumeApiClient("token", base_url="https://api.test/api", http_client=http_client)
        listed = await client.list_resumes()
        deleted = await client.delete(3)

    assert not listed.ok and not deleted.ok
    assert "unreachable" in listed.error


@pytest.mark.asyncio
async def test_suggestion_without_replacement_cannot_be_applied(persistence, scheduler):
    match = language_tool_match(0, 5, "Texas A&M University", "")
    match["replacements"] = []
    session = make_session(
        persistence, scheduler, document=sample_document(), language_tool=FakeLanguageTool(matches=[match])
    )
    before = session.document

    flagged = await session.check_grammar("experience.0.company")
    result = session.apply_suggestion(flagged[0])

    assert flagged[0].original == "Texas"
    assert flagged[0].suggestion == ""
    assert not result.ok
    assert session.document is before
    assert session.document.experience[0].company == "Texas A&M University"


class UnavailableScheduler(ManualScheduler):
    def call_later(self, delay, callback):
        raise RuntimeError("timers unavailable")


def test_session_without_event_loop_edits_and_saves(persistence, store):
    session = EditorSession(persistence, language_tool=FakeLanguageTool(), snapshot_delay=60)

    result = session.set_field("personalInfo.name", "Ann")

    assert result.ok
    assert isinstance(session.scheduler, ThreadingScheduler)
    assert session.document.personal_info.name == "Ann"
    assert RESUME_DATA_KEY not in store.data

    session.close()
    assert json.loads(store.data[RESUME_DATA_KEY])["personalInfo"]["name"] == "Ann"


@pytest.mark.asyncio
async def test_session_inside_event_loop_snapshots_on_it(persistence, store):
    session = EditorSession(persistence, language_tool=FakeLanguageTool(), snapshot_delay=0.01)

    session.set_field("personalInfo.name", "Ann")
    await asyncio.sleep(0.05)

    assert isinstance(session.scheduler, AsyncioScheduler)
    assert json.loads(store.data[RESUME_DATA_KEY])["personalInfo"]["name"] == "Ann"


def test_scheduler_failure_leaves_document_untouched(persistence):
    session = EditorSession(persistence, scheduler=UnavailableScheduler(), language_tool=FakeLanguageTool())
    before = session.document

    with pytest.raises(RuntimeError):
        session.set_field("personalInfo.name", "Ann")

    assert session.document is before
    assert not session.unsaved
