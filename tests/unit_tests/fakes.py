import datetime
from types import SimpleNamespace

from dynamic_draft.utilities.exceptions.database import EntityDoesNotExist


class FakeLanguageTool:
    """Stands in for ``LanguageToolClient``; records every text it was asked to check."""

    def __init__(self, matches=None, on_check=None):
        self.matches = matches or []
        self.calls: list[str] = []
        self.on_check = on_check

    async def check(self, text):
        self.calls.append(text)
        if self.on_check is not None:
            self.on_check(text)
        return list(self.matches)


def language_tool_match(offset, length, context_text, replacement, issue_type="grammar", description="Rule"):
    return {
        "offset": offset,
        "length": length,
        "message": description,
        "replacements": [{"value": replacement}],
        "context": {"text": context_text, "offset": offset, "length": length},
        "rule": {"description": description, "issueType": issue_type},
    }


class FakeResumeRepository:
    def __init__(self):
        self.rows: dict[int, SimpleNamespace] = {}
        self._next_id = 1
        self._base = datetime.datetime(2026, 10, 1, tzinfo=datetime.timezone.utc)

    def _get(self, resume_id, user_id):
        row = self.rows.get(resume_id)
        if row is None or row.user_id != user_id:
            raise EntityDoesNotExist(f"Resume with id `{resume_id}` does not exist!")
        return row

    async def list_by_user(self, *, user_id):
        rows = [row for row in self.rows.values() if row.user_id == user_id]
        return sorted(rows, key=lambda row: row.date_created, reverse=True)

    async def create_resume(self, *, user_id, content, template):
        row = SimpleNamespace(
            id=self._next_id,
            user_id=user_id,
            content=content,
            template=template,
            date_created=self._base + datetime.timedelta(minutes=self._next_id),
            date_updated=None,
        )
        self.rows[row.id] = row
        self._next_id += 1
        return row

    async def update_content(self, *, resume_id, user_id, content):
        row = self._get(resume_id, user_id)
        row.content = content
        row.date_updated = self._base + datetime.timedelta(days=1)
        return row

    async def delete_resume(self, *, resume_id, user_id):
        self._get(resume_id, user_id)
        del self.rows[resume_id]


class FakeInterviewRepository:
    def __init__(self):
        self.rows: dict[int, SimpleNamespace] = {}
        self._next_id = 1

    def _get(self, interview_id, user_id):
        row = self.rows.get(interview_id)
        if row is None or row.user_id != user_id:
            raise EntityDoesNotExist(f"Interview with id `{interview_id}` does not exist!")
        return row

    async def list_by_user(self, *, user_id):
        rows = [row for row in self.rows.values() if row.user_id == user_id]
        return sorted(rows, key=lambda row: row.scheduled_at)

    async def create_interview(self, *, user_id, **fields):
        row = SimpleNamespace(
            id=self._next_id,
            user_id=user_id,
            created_at=datetime.datetime(2026, 10, 1, tzinfo=datetime.timezone.utc),
            **fields,
        )
        self.rows[row.id] = row
        self._next_id += 1
        return row

    async def update_interview(self, *, interview_id, user_id, changes):
        row = self._get(interview_id, user_id)
        for field, value in changes.items():
            setattr(row, field, value)
        return row

    async def delete_interview(self, *, interview_id, user_id):
        self._get(interview_id, user_id)
        del self.rows[interview_id]


class FakeUserRepository:
    def __init__(self):
        self.users: dict[str, SimpleNamespace] = {}

    async def get_or_create_user(self, *, email, name=None):
        if email not in self.users:
            self.users[email] = SimpleNamespace(id=len(self.users) + 1, email=email, name=name)
        return self.users[email]
