import datetime

import pytest
from fastapi.testclient import TestClient

from dynamic_draft.api.dependencies.repository import get_repository
from dynamic_draft.api.routes.grammar import get_language_tool_client
from dynamic_draft.main import initialize_backend_application
from dynamic_draft.repository.crud.interview import InterviewCRUDRepository
from dynamic_draft.repository.crud.resume import ResumeCRUDRepository
from dynamic_draft.repository.crud.user import UserCRUDRepository
from dynamic_draft.securities.authorizations.jwt import jwt_generator
from dynamic_draft.services import llm
from dynamic_draft.services.templates import sample_document
from tests.unit_tests.fakes import (
    FakeInterviewRepository,
    FakeLanguageTool,
    FakeResumeRepository,
    FakeUserRepository,
    language_tool_match,
)


@pytest.fixture
def language_tool():
    return FakeLanguageTool(matches=[language_tool_match(6, 3, "Wrote teh docs", "the", issue_type="misspelling")])


@pytest.fixture
def client(language_tool):
    app = initialize_backend_application()
    users, resumes, interviews = FakeUserRepository(), FakeResumeRepository(), FakeInterviewRepository()
    app.dependency_overrides[get_repository(repo_type=UserCRUDRepository)] = lambda: users
    app.dependency_overrides[get_repository(repo_type=ResumeCRUDRepository)] = lambda: resumes
    app.dependency_overrides[get_repository(repo_type=InterviewCRUDRepository)] = lambda: interviews
    app.dependency_overrides[get_language_tool_client] = lambda: language_tool
    return TestClient(app)


def auth(email="ada@example.com", name="Ada"):
    return {"Authorization": f"Bearer {jwt_generator.generate_access_token(email=email, name=name)}"}


def sample_content():
    return sample_document().model_dump(mode="json", by_alias=True)


def test_health(client):
    assert client.get("/api/health").json()["status"] == "healthy"


def test_resumes_require_a_valid_token(client):
    assert client.get("/api/resumes").status_code in (401, 403)
    assert client.get("/api/resumes", headers={"Authorization": "Bearer nonsense"}).status_code == 401

    expired = jwt_generator.generate_access_token(email="ada@example.com", expires_delta=datetime.timedelta(minutes=-5))
    assert client.get("/api/resumes", headers={"Authorization": f"Bearer {expired}"}).status_code == 401


def test_resume_crud_flow(client):
    created = client.post("/api/resumes", json={"content": sample_content(), "template": "professional"}, headers=auth())
    assert created.status_code == 201
    body = created.json()
    assert body["template"] == "professional"
    assert body["content"]["personalInfo"]["name"] == "Jake Ryan"
    resume_id = body["id"]

    content = sample_content()
    content["personalInfo"]["name"] = "Jake R."
    updated = client.patch(f"/api/resumes/{resume_id}", json={"content": content}, headers=auth())
    assert updated.status_code == 200
    assert updated.json()["content"]["personalInfo"]["name"] == "Jake R."
    assert updated.json()["dateUpdated"] is not None

    listed = client.get("/api/resumes", headers=auth())
    assert [r["id"] for r in listed.json()] == [resume_id]

    assert client.delete(f"/api/resumes/{resume_id}", headers=auth()).json() == {"success": True}
    assert client.get("/api/resumes", headers=auth()).json() == []


def test_resumes_are_scoped_to_their_owner(client):
    resume_id = client.post("/api/resumes", json={"content": sample_content()}, headers=auth()).json()["id"]
    other = auth(email="grace@example.com", name="Grace")

    assert client.get("/api/resumes", headers=other).json() == []
    assert client.patch(f"/api/resumes/{resume_id}", json={"content": sample_content()}, headers=other).status_code == 404
    assert client.delete(f"/api/resumes/{resume_id}", headers=other).status_code == 404


def test_invalid_document_is_rejected(client):
    content = sample_content()
    content["sectionOrder"] = ["skills", "skills", "projects", "education", "experience"]
    assert client.post("/api/resumes", json={"content": content}, headers=auth()).status_code == 422


def test_analyze_without_model_returns_empty_review(client, monkeypatch):
    monkeypatch.setattr(llm, "_get_client", lambda: None)
    response = client.post("/api/resumes/analyze", json={"content": sample_content()}, headers=auth())

    assert response.status_code == 200
    assert response.json()["analysis"] == ""
    assert response.json()["error"] is None


def test_templates(client):
    listed = client.get("/api/templates").json()
    assert {"id": "professional", "name": "Professional"} in listed

    default = client.get("/api/templates/default").json()
    assert default["sectionOrder"] == ["personalInfo", "education", "experience", "projects", "skills"]

    devops = client.get("/api/templates/devops").json()
    assert devops["personalInfo"]["name"] == "Alex DevOps"
    assert "cloudPlatforms" in devops["skills"]

    assert client.get("/api/templates/unknown").status_code == 404


def test_grammar_check_local_only(client, language_tool):
    response = client.post("/api/grammar/check", json={"fieldPath": "experience.0.company", "text": "I is a engineer"})

    assert response.status_code == 200
    assert [s["suggestion"] for s in response.json()["suggestions"]] == ["I am", "an"]
    assert language_tool.calls == []


def test_grammar_check_with_remote(client, language_tool):
    response = client.post(
        "/api/grammar/check",
        json={"fieldPath": "projects.0.details.0", "text": "Wrote teh docs", "useRemote": True},
    )

    suggestions = response.json()["suggestions"]
    assert language_tool.calls == ["Wrote teh docs"]
    assert suggestions[0]["original"] == "teh"
    assert suggestions[0]["severity"] == "error"


def test_grammar_check_rejects_bad_path(client):
    response = client.post("/api/grammar/check", json={"fieldPath": "summary.text", "text": "x"})
    assert response.status_code == 422


def test_interview_flow(client):
    starts_at = datetime.datetime.now(datetime.timezone.utc) + datetime.timedelta(minutes=10)
    created = client.post(
        "/api/interviews",
        json={
            "company": "CloudTech Solutions",
            "position": "Senior DevOps Engineer",
            "scheduledAt": starts_at.isoformat(),
            "type": "video",
            "reminder": True,
        },
        headers=auth(),
    )
    assert created.status_code == 201
    interview = created.json()
    assert interview["status"] == "scheduled"
    assert interview["scheduledAt"].endswith("Z")
    assert len(interview["preparationTasks"]) == 5
    assert not any(task["completed"] for task in interview["preparationTasks"])

    reminders = client.get("/api/interviews/reminders", headers=auth()).json()
    assert [r["interviewId"] for r in reminders] == [interview["id"]]
    assert "CloudTech Solutions" in reminders[0]["message"]

    tasks = interview["preparationTasks"]
    tasks[0]["completed"] = True
    updated = client.put(
        f"/api/interviews/{interview['id']}",
        json={"status": "completed", "preparationTasks": tasks},
        headers=auth(),
    ).json()
    assert updated["status"] == "completed"
    assert updated["preparationTasks"][0]["completed"] is True
    assert client.get("/api/interviews/reminders", headers=auth()).json() == []

    assert client.delete(f"/api/interviews/{interview['id']}", headers=auth()).json() == {"success": True}
    assert client.put("/api/interviews/999", json={"notes": "x"}, headers=auth()).status_code == 404


def test_lifespan_opens_and_disposes_the_database(monkeypatch):
    calls = []

    async def fake_initialize(backend_app):
        calls.append(("initialize", backend_app))

    async def fake_dispose(backend_app):
        calls.append(("dispose", backend_app))

    monkeypatch.setattr("dynamic_draft.config.events.initialize_db_connection", fake_initialize)
    monkeypatch.setattr("dynamic_draft.config.events.dispose_db_connection", fake_dispose)
    app = initialize_backend_application()

    with TestClient(app) as lifespan_client:
        assert [name for name, _ in calls] == ["initialize"]
        assert lifespan_client.get("/api/health").status_code == 200

    assert [name for name, _ in calls] == ["initialize", "dispose"]
    assert all(backend_app is app for _, backend_app in calls)
