import logging
import re
import time

from openai import AsyncOpenAI

from dynamic_draft.config.manager import settings
from dynamic_draft.models.schemas.resume import ResumeDocument

logger = logging.getLogger(__name__)

# Lazy client holder; create only when needed and when API key is present
_client: AsyncOpenAI | None = None


def _get_client() -> AsyncOpenAI | None:
    global _client
    if _client is not None:
        return _client
    api_key = settings.OPENAI_API_KEY
    if not api_key:
        return None
    _client = AsyncOpenAI(
        api_key=api_key,
        timeout=float(getattr(settings, "OPENAI_TIMEOUT_SECONDS", 60.0)),
        max_retries=3,
    )
    return _client


ANALYSIS_SECTIONS: tuple[str, ...] = (
    "Overall Structure and Formatting",
    "Content Relevance and Impact",
    "Section-specific Improvements",
    "Missing Information",
    "General Tips",
)

ANALYSIS_FAILED_MESSAGE = "An error occurred while analyzing the resume."

_NUMBERING = re.compile(r"^(?:\d+[.)]\s*)?")
_SUBSECTION = re.compile(r"^[a-e]\)")


def build_analysis_prompt(document: ResumeDocument) -> str:
    resume_json = document.model_dump_json(by_alias=True, indent=2, exclude={"version"})
    return (
        "Analyze the following resume and provide structured suggestions for improvement:\n\n"
        f"{resume_json}\n\n"
        "Please provide feedback in the following format:\n\n"
        "1. Overall Structure and Formatting:\n[Your feedback here]\n\n"
        "2. Content Relevance and Impact:\n[Your feedback here]\n\n"
        "3. Section-specific Improvements:\n"
        "a) Personal Information:\n[Your feedback here]\n"
        "b) Education:\n[Your feedback here]\n"
        "c) Experience:\n[Your feedback here]\n"
        "d) Projects:\n[Your feedback here]\n"
        "e) Skills:\n[Your feedback here]\n\n"
        "4. Missing Information:\n[Your feedback here]\n\n"
        "5. General Tips:\n[Your feedback here]\n\n"
        "Please ensure each section is clearly separated and labeled."
    )


def format_analysis(text: str) -> str:
    """Turn the model's numbered reply into markdown.

    Top-level parts become ``###`` headings and the ``a)``-``e)`` subsections
    ``####`` headings; blank lines are dropped.
    """
    parts: list[str] = []
    for line in (text or "").splitlines():
        stripped = line.replace("*", "").strip()
        if not stripped:
            continue
        heading = _NUMBERING.sub("", stripped, count=1)
        if any(heading.startswith(section) for section in ANALYSIS_SECTIONS):
            parts.append(f"\n\n### {heading}\n")
        elif _SUBSECTION.match(stripped):
            parts.append(f"\n#### {stripped}\n")
        else:
            parts.append(f"{stripped}\n")
    return "".join(parts).strip()


async def analyze_resume(document: ResumeDocument) -> tuple[str, str | None, int | None, str]:
    """
    Ask the hosted model for a structured review. Returns (markdown, error, latency_ms, model).
    Never raises; without an API key the review is empty and no error is reported.
    """
    model = settings.OPENAI_MODEL
    client = _get_client()
    if client is None:
        return "", None, None, model

    start = time.perf_counter()
    try:
        resp = await client.chat.completions.create(
            model=model,
            messages=[
                {"role": "system", "content": "You are an experienced technical recruiter reviewing resumes."},
                {"role": "user", "content": build_analysis_prompt(document)},
            ],
        )
        raw = resp.choices[0].message.content or ""
    except Exception as e:  # noqa: BLE001
        latency_ms = int((time.perf_counter() - start) * 1000)
        logger.warning("Resume analysis failed after %sms: %s", latency_ms, e)
        return ANALYSIS_FAILED_MESSAGE, str(e), latency_ms, model

    latency_ms = int((time.perf_counter() - start) * 1000)
    logger.info(f"Resume analysis completed, model={model}, latency={latency_ms}ms")
    return format_analysis(raw), None, latency_ms, model
