"""Grammar suggestions attached to resume fields.

Two tiers feed the overlay: a cheap regex check that runs (debounced) on every
edit, and the LanguageTool service that runs only when the user asks for it,
at most once per field per cool-down window. Results for a field replace the
previous list for that field. Suggestions that flag well-known resume terms
(tool and technology names, stock resume phrases) are dropped before they are
stored.
"""

from __future__ import annotations

import asyncio
import logging
import re
import time
import typing

from dynamic_draft.config.manager import settings
from dynamic_draft.editor.scheduling import Debouncer, Scheduler
from dynamic_draft.models.schemas.grammar import GrammarSuggestion, Severity
from dynamic_draft.services.language_tool import LanguageToolClient

logger = logging.getLogger(__name__)


class _Rule(typing.NamedTuple):
    pattern: re.Pattern[str]
    replace: typing.Callable[[re.Match[str]], str]
    rule: str
    severity: Severity


def _match_case(template: str, word: str) -> str:
    return template[:1].upper() + template[1:] if word[:1].isupper() else template


LOCAL_RULES: tuple[_Rule, ...] = (
    _Rule(
        re.compile(r"\b(a)\s+(?=[aeiou])", re.IGNORECASE),
        lambda m: _match_case("an", m.group(1)),
        "a/an usage",
        Severity.WARNING,
    ),
    _Rule(
        re.compile(r"\b(an)\s+(?=[b-df-hj-np-tv-z])", re.IGNORECASE),
        lambda m: _match_case("a", m.group(1)),
        "a/an usage",
        Severity.WARNING,
    ),
    _Rule(
        re.compile(r"\b(i)\s+is\b", re.IGNORECASE),
        lambda m: f"{m.group(1).upper()} am",
        "subject-verb agreement",
        Severity.ERROR,
    ),
    _Rule(
        re.compile(r"\b(we|you|they)\s+(is|was)\b", re.IGNORECASE),
        lambda m: f"{m.group(1)} {'are' if m.group(2).lower() == 'is' else 'were'}",
        "subject-verb agreement",
        Severity.ERROR,
    ),
    _Rule(
        re.compile(r"\b(he|she|it)\s+(am|are)\b", re.IGNORECASE),
        lambda m: f"{m.group(1)} is",
        "subject-verb agreement",
        Severity.ERROR,
    ),
    _Rule(
        re.compile(r"\b(your)\s+(\w+ing)\b", re.IGNORECASE),
        lambda m: f"{_match_case('you', m.group(1))}'re {m.group(2)}",
        "your/you're usage",
        Severity.ERROR,
    ),
    _Rule(
        re.compile(r"\b(their)\s+(\w+ing)\b", re.IGNORECASE),
        lambda m: f"{_match_case('they', m.group(1))}'re {m.group(2)}",
        "their/they're usage",
        Severity.ERROR,
    ),
    _Rule(
        re.compile(r"\b(its)\s+(\w+ing)\b", re.IGNORECASE),
        lambda m: f"{_match_case('it', m.group(1))}'s {m.group(2)}",
        "its/it's usage",
        Severity.ERROR,
    ),
)

# Stock resume phrases plus tool/technology names that generic checkers flag as misspellings.
RESUME_ALLOW_LIST: frozenset[str] = frozenset(
    term.lower()
    for term in (
        "results-driven", "team player", "detail-oriented", "self-motivated", "problem-solver",
        "critical thinker", "innovative", "leadership", "communication", "time management",
        "adaptable", "proactive", "analytical", "creative",
        "API", "APIs", "AWS", "Azure", "CI/CD", "CSS", "Django", "Docker", "ElasticSearch",
        "FastAPI", "Figma", "Flask", "GCP", "Git", "GitHub", "GitLab", "GraphQL", "HTML",
        "IntelliJ", "Istio", "Java", "JavaScript", "Jenkins", "Jest", "JUnit", "Kafka",
        "Kubernetes", "LinkedIn", "Matplotlib", "Maven", "Metasploit", "MongoDB", "Mongoose",
        "MySQL", "Next.js", "Node.js", "NumPy", "pandas", "PostgreSQL", "Postgres", "PyCharm",
        "PyTorch", "Redis", "Redux", "REST", "Scikit-learn", "Snort", "Spigot", "SQL",
        "TensorFlow", "Terraform", "TravisCI", "TypeScript", "Vercel", "Webpack", "Wireshark",
    )
)

_SEVERITY_BY_ISSUE_TYPE = {"misspelling": Severity.ERROR}


def is_resume_specific_term(term: str) -> bool:
    return term.strip().lower() in RESUME_ALLOW_LIST


def filter_allow_listed(suggestions: typing.Iterable[GrammarSuggestion]) -> list[GrammarSuggestion]:
    return [s for s in suggestions if not is_resume_specific_term(s.original)]


def check_local_grammar(field_path: str, text: str) -> list[GrammarSuggestion]:
    suggestions: list[GrammarSuggestion] = []
    for rule in LOCAL_RULES:
        for match in rule.pattern.finditer(text or ""):
            original = match.group(0).rstrip()
            suggestions.append(
                GrammarSuggestion(
                    field_path=field_path,
                    original=original,
                    suggestion=rule.replace(match),
                    rule=rule.rule,
                    severity=rule.severity,
                    offset=match.start(),
                    length=len(original),
                )
            )
    suggestions.sort(key=lambda s: s.offset or 0)
    return suggestions


def map_language_tool_match(field_path: str, match: dict[str, typing.Any]) -> GrammarSuggestion | None:
    try:
        offset = int(match["offset"])
        length = int(match["length"])
    except (KeyError, TypeError, ValueError):
        return None

    context = match.get("context") or {}
    context_text = context.get("text") or ""
    context_offset = context.get("offset")
    if isinstance(context_offset, int):
        original = context_text[context_offset : context_offset + int(context.get("length") or length)]
    else:
        original = ""

    replacements = match.get("replacements") or []
    suggestion = ""
    if replacements and isinstance(replacements[0], dict):
        suggestion = str(replacements[0].get("value") or "")

    rule = match.get("rule") or {}
    return GrammarSuggestion(
        field_path=field_path,
        original=original,
        suggestion=suggestion,
        rule=str(rule.get("description") or match.get("message") or "grammar"),
        severity=_SEVERITY_BY_ISSUE_TYPE.get(rule.get("issueType"), Severity.WARNING),
        offset=offset,
        length=length,
    )


async def collect_suggestions(
    field_path: str, text: str, remote: LanguageToolClient | None = None
) -> list[GrammarSuggestion]:
    """Local rules plus, when ``remote`` is given, LanguageTool matches; allow-listed terms removed."""
    suggestions = check_local_grammar(field_path, text)
    if remote is not None:
        matches = await remote.check(text)
        suggestions += [s for s in (map_language_tool_match(field_path, m) for m in matches) if s is not None]
    return filter_allow_listed(suggestions)


class GrammarOverlay:
    """Per-field suggestion lists for one editing session.

    ``current_text`` reports what a field holds right now; a check whose text
    no longer matches when it completes is discarded instead of stored.
    """

    def __init__(
        self,
        *,
        remote: LanguageToolClient | None = None,
        scheduler: Scheduler | None = None,
        current_text: typing.Callable[[str], str | None] | None = None,
        cooldown_seconds: float | None = None,
        debounce_seconds: float | None = None,
    ) -> None:
        self._remote = remote or LanguageToolClient()
        self._clock: typing.Callable[[], float] = scheduler.now if scheduler is not None else time.monotonic
        self._current_text = current_text
        self._cooldown = settings.GRAMMAR_REMOTE_COOLDOWN_SECONDS if cooldown_seconds is None else cooldown_seconds
        debounce = settings.GRAMMAR_LOCAL_DEBOUNCE_SECONDS if debounce_seconds is None else debounce_seconds
        self._local_debouncer = Debouncer(scheduler, debounce) if scheduler is not None else None

        self._suggestions: dict[str, tuple[GrammarSuggestion, ...]] = {}
        self._last_remote_at: dict[str, float] = {}
        self._in_flight: dict[str, asyncio.Future[list[GrammarSuggestion]]] = {}

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def suggestions(self, field_path: str) -> list[GrammarSuggestion]:
        return list(self._suggestions.get(str(field_path), ()))

    def snapshot(self) -> dict[str, list[GrammarSuggestion]]:
        return {path: list(items) for path, items in self._suggestions.items()}

    def remote_in_flight(self, field_path: str) -> bool:
        return str(field_path) in self._in_flight

    def seconds_until_remote_allowed(self, field_path: str) -> float:
        last = self._last_remote_at.get(str(field_path))
        if last is None:
            return 0.0
        return max(0.0, self._cooldown - (self._clock() - last))

    # ------------------------------------------------------------------
    # Checks
    # ------------------------------------------------------------------
    async def check(self, field_path: str, text: str, use_remote: bool = False) -> list[GrammarSuggestion]:
        field_path = str(field_path)
        if not use_remote:
            return self._store(field_path, text, check_local_grammar(field_path, text))

        in_flight = self._in_flight.get(field_path)
        if in_flight is not None:
            logger.debug("Remote check for %s already running; joining it", field_path)
            return await in_flight

        if self.seconds_until_remote_allowed(field_path) > 0:
            logger.debug("Remote check for %s skipped: cool-down active", field_path)
            return self.suggestions(field_path)

        self._last_remote_at[field_path] = self._clock()
        task = asyncio.ensure_future(self._run_remote(field_path, text))
        self._in_flight[field_path] = task
        try:
            return await task
        finally:
            if self._in_flight.get(field_path) is task:
                del self._in_flight[field_path]

    async def _run_remote(self, field_path: str, text: str) -> list[GrammarSuggestion]:
        return self._store(field_path, text, await collect_suggestions(field_path, text, self._remote))

    def schedule_local_check(self, field_path: str, text: str) -> None:
        """Debounced local check; runs immediately when no scheduler is attached."""
        field_path = str(field_path)
        if self._local_debouncer is None:
            self._store(field_path, text, check_local_grammar(field_path, text))
            return
        self._local_debouncer.schedule(
            field_path, lambda: self._store(field_path, text, check_local_grammar(field_path, text))
        )

    def _store(self, field_path: str, text: str, suggestions: list[GrammarSuggestion]) -> list[GrammarSuggestion]:
        if self._current_text is not None:
            current = self._current_text(field_path)
            if current is None:
                self._suggestions.pop(field_path, None)
                return []
            if current != text:
                logger.debug("Discarding stale suggestions for %s", field_path)
                return self.suggestions(field_path)

        kept = filter_allow_listed(suggestions)
        self._suggestions[field_path] = tuple(kept)
        return list(kept)

    # ------------------------------------------------------------------
    # Housekeeping
    # ------------------------------------------------------------------
    def clear(self, field_path: str) -> None:
        self._suggestions.pop(str(field_path), None)

    def discard(self, suggestion: GrammarSuggestion) -> None:
        field_path = suggestion.field_path
        remaining = tuple(s for s in self._suggestions.get(field_path, ()) if s != suggestion)
        if remaining:
            self._suggestions[field_path] = remaining
        else:
            self._suggestions.pop(field_path, None)

    def clear_prefix(self, prefix: str) -> None:
        """Drop every overlay whose path starts with ``prefix`` (e.g. after list items shift)."""
        for path in [p for p in self._suggestions if p == prefix or p.startswith(prefix + ".")]:
            del self._suggestions[path]

    def clear_all(self) -> None:
        self._suggestions.clear()
        if self._local_debouncer is not None:
            self._local_debouncer.cancel_all()
