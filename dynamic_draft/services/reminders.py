"""Interview reminders.

An interview with its reminder switched on is due for a notification once the
clock enters the lead window before it starts, and stops being due when it
starts. ``ReminderPoller`` re-evaluates that rule on a fixed interval and
notifies each interview once per scheduled time.
"""

import datetime
import inspect
import logging
import typing

from dynamic_draft.config.manager import settings
from dynamic_draft.editor.scheduling import ScheduledTask, Scheduler
from dynamic_draft.models.schemas.interview import InterviewStatus

logger = logging.getLogger(__name__)


class Remindable(typing.Protocol):
    id: int
    company: str
    position: str
    scheduled_at: datetime.datetime
    reminder: bool
    status: typing.Any


def default_lead() -> datetime.timedelta:
    return datetime.timedelta(minutes=settings.INTERVIEW_REMINDER_LEAD_MINUTES)


def _aware(moment: datetime.datetime) -> datetime.datetime:
    return moment if moment.tzinfo is not None else moment.replace(tzinfo=datetime.timezone.utc)


def is_due(interview: Remindable, now: datetime.datetime, lead: datetime.timedelta) -> bool:
    if not interview.reminder or InterviewStatus(interview.status) is not InterviewStatus.SCHEDULED:
        return False
    starts_at = _aware(interview.scheduled_at)
    now = _aware(now)
    return starts_at - lead <= now < starts_at


def due_reminders(
    interviews: typing.Iterable[Remindable],
    now: datetime.datetime,
    lead: datetime.timedelta | None = None,
) -> list[Remindable]:
    lead = default_lead() if lead is None else lead
    return [interview for interview in interviews if is_due(interview, now, lead)]


def reminder_message(interview: Remindable, lead: datetime.timedelta | None = None) -> str:
    lead = default_lead() if lead is None else lead
    minutes = int(lead.total_seconds() // 60)
    return f"Your interview with {interview.company} for {interview.position} is in {minutes} minutes."


def _utcnow() -> datetime.datetime:
    return datetime.datetime.now(datetime.timezone.utc)


class ReminderPoller:
    """Polls ``fetch`` every ``interval`` seconds and calls ``notify`` for newly due interviews.

    ``fetch`` and ``notify`` may be plain callables or coroutine functions.
    """

    def __init__(
        self,
        scheduler: Scheduler,
        fetch: typing.Callable[[], typing.Any],
        notify: typing.Callable[[Remindable], typing.Any],
        *,
        lead: datetime.timedelta | None = None,
        interval: float | None = None,
        clock: typing.Callable[[], datetime.datetime] = _utcnow,
    ) -> None:
        self._scheduler = scheduler
        self._fetch = fetch
        self._notify = notify
        self.lead = default_lead() if lead is None else lead
        self.interval = settings.INTERVIEW_REMINDER_POLL_SECONDS if interval is None else interval
        self._clock = clock
        self._notified: set[tuple[int, datetime.datetime]] = set()
        self._task: ScheduledTask | None = None

    @property
    def running(self) -> bool:
        return self._task is not None

    def start(self) -> None:
        if self._task is None:
            self._task = self._scheduler.call_later(self.interval, self._tick)

    def stop(self) -> None:
        if self._task is not None:
            self._task.cancel()
            self._task = None

    async def _tick(self) -> None:
        try:
            await self.poll_once()
        finally:
            if self._task is not None:
                self._task = self._scheduler.call_later(self.interval, self._tick)

    async def poll_once(self) -> list[Remindable]:
        interviews = self._fetch()
        if inspect.isawaitable(interviews):
            interviews = await interviews

        fired: list[Remindable] = []
        for interview in due_reminders(interviews, self._clock(), self.lead):
            key = (interview.id, _aware(interview.scheduled_at))
            if key in self._notified:
                continue
            self._notified.add(key)
            logger.info("Interview reminder due for interview %s", interview.id)
            result = self._notify(interview)
            if inspect.isawaitable(result):
                await result
            fired.append(interview)
        return fired
