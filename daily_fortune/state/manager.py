"""
Daily fortune lifecycle manager.

Owns the in-memory lifecycle state, reconciles it with the durable store
on startup and runs the fetch → persist → show sequence when the user
asks for a fortune.
"""

import asyncio
from typing import Callable, Optional

from ..errors import FortuneAppError, ProviderError
from ..logging.config import get_logger
from ..provider.base import FortuneProvider
from ..storage.base import KeyValueStore
from ..utils.ids import FortuneIdGenerator
from ..utils.time import (
    CalendarDay,
    Clock,
    format_iso,
    make_calendar_day,
    now_utc,
    parse_iso,
)
from .models import (
    DailyRecord,
    Fortune,
    FortuneView,
    GenerationResult,
    LifecycleState,
)
from .transitions import validate_transition

logger = get_logger(__name__)

Subscriber = Callable[[LifecycleState], None]

DEFAULT_ERROR = "Something went wrong"
SAVE_ERROR = "Could not save your fortune. Please try again."
CANCELLED_ERROR = "Fortune request was cancelled. Please try again."


class DailyFortuneManager:
    """
    Single owner of the daily fortune lifecycle.

    ``reconcile()`` and ``generate()`` are the only operations that change
    state. Every change produces a new immutable ``LifecycleState`` that is
    pushed to subscribers.
    """

    def __init__(
        self,
        store: KeyValueStore,
        provider: FortuneProvider,
        *,
        fortune_key: str = "todaysFortune",
        date_key: str = "lastGeneratedDate",
        client_id: str = "DailyFortuneApp",
        calendar_day: Optional[CalendarDay] = None,
        clock: Clock = now_utc,
        id_generator: Optional[FortuneIdGenerator] = None,
    ):
        self.store = store
        self.provider = provider
        self.fortune_key = fortune_key
        self.date_key = date_key
        self.client_id = client_id
        self.calendar_day = calendar_day or make_calendar_day()
        self.clock = clock
        self.id_generator = id_generator or FortuneIdGenerator()
        self.logger = logger

        self._state = LifecycleState()
        self._revision = 0
        self._subscribers: list[Subscriber] = []

    @property
    def state(self) -> LifecycleState:
        """Current lifecycle snapshot."""
        return self._state

    def today(self) -> str:
        """Calendar day of the injected clock."""
        return self.calendar_day(self.clock())

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """
        Register ``callback`` for state changes.

        Returns:
            Function that removes the subscription
        """
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    async def reconcile(self) -> LifecycleState:
        """
        Decide the view from the durable store.

        Shows the cached fortune when it was generated today, otherwise
        falls back to the initial view. Read failures count as a cache miss.
        """
        if self._state.is_loading:
            self.logger.info("Reconcile skipped, generation in flight")
            return self._state

        revision = self._revision
        record = await self._read_record()

        if self._revision != revision:
            # A generate() ran while we were reading; its state wins
            self.logger.info("Reconcile result discarded, state changed during read")
            return self._state

        today = self.today()
        if record is not None and record.generation_date == today:
            self._set_state(
                self._state.with_fortune(record.fortune),
                trigger="reconcile",
                context={"fortune_id": record.fortune.id, "today": today}
            )
        else:
            self._set_state(
                LifecycleState(),
                trigger="reconcile",
                context={
                    "today": today,
                    "stored_date": record.generation_date if record else None,
                }
            )

        return self._state

    async def generate(self) -> GenerationResult:
        """
        Fetch, persist and show a new fortune.

        Overlapping calls are rejected while one is in flight, and no new
        fortune is requested once today's is shown.
        """
        if self._state.is_loading:
            self.logger.info("Generate ignored, request already in flight")
            return GenerationResult.SKIPPED_IN_FLIGHT

        if self._state.view == FortuneView.FORTUNE:
            self.logger.info(
                "Generate ignored, fortune already shown",
                fortune_id=self._state.fortune.id if self._state.fortune else None
            )
            return GenerationResult.SKIPPED_ALREADY_GENERATED

        # Entering LOADING before the first await is the re-entrancy guard
        self._set_state(self._state.with_loading(), trigger="generate")

        try:
            return await self._fetch_and_store()
        except asyncio.CancelledError as e:
            # Leave LOADING so later calls are not skipped forever
            if self._state.is_loading:
                self._fail(CANCELLED_ERROR, error=e)
            raise

    async def _fetch_and_store(self) -> GenerationResult:
        try:
            text = await self.provider.fetch_fortune(self.client_id)
        except ProviderError as e:
            return self._fail(e.message or DEFAULT_ERROR, error=e)
        except Exception as e:
            return self._fail(str(e) or DEFAULT_ERROR, error=e)

        now = self.clock()
        fortune = Fortune(
            text=text,
            generated_at=format_iso(now),
            id=self.id_generator.next_id(now),
        )
        record = DailyRecord(fortune=fortune, generation_date=self.calendar_day(now))

        try:
            await self._write_record(record)
        except Exception as e:
            return self._fail(SAVE_ERROR, error=e)

        self._set_state(
            self._state.with_fortune(fortune),
            trigger="generate",
            context={"fortune_id": fortune.id, "generation_date": record.generation_date}
        )
        return GenerationResult.GENERATED

    async def _read_record(self) -> Optional[DailyRecord]:
        """Load the daily record, or None on a miss or any read failure."""
        try:
            raw_fortune = await self.store.get(self.fortune_key)
            stored_date = await self.store.get(self.date_key)

            if not raw_fortune or not stored_date:
                return None

            fortune = Fortune.from_json(raw_fortune)
        except Exception as e:
            self.logger.warning(
                "Cached fortune unreadable, treating as miss",
                error_type=type(e).__name__,
                error=str(e),
                details=e.to_dict() if isinstance(e, FortuneAppError) else None
            )
            return None

        record = DailyRecord(fortune=fortune, generation_date=stored_date)
        self._check_record_day(record)
        return record

    def _check_record_day(self, record: DailyRecord) -> None:
        """Warn when the stored day does not match the fortune's own timestamp."""
        try:
            fortune_day = self.calendar_day(parse_iso(record.fortune.generated_at))
        except (TypeError, ValueError):
            fortune_day = None

        if fortune_day != record.generation_date:
            self.logger.warning(
                "Stored day does not match fortune timestamp",
                stored_date=record.generation_date,
                fortune_day=fortune_day,
                fortune_id=record.fortune.id
            )

    async def _write_record(self, record: DailyRecord) -> None:
        """
        Persist the daily record.

        The date key is cleared first and written last, so a failure at any
        step leaves a record that reconcile() treats as a miss.
        """
        await self.store.set(self.date_key, "")
        await self.store.set(self.fortune_key, record.fortune.to_json())
        await self.store.set(self.date_key, record.generation_date)

        self.logger.info(
            "Daily record stored",
            fortune_id=record.fortune.id,
            generation_date=record.generation_date
        )

    def _fail(self, message: str, error: BaseException) -> GenerationResult:
        details = error.to_dict() if isinstance(error, FortuneAppError) else None
        self.logger.warning(
            "Fortune generation failed",
            error_type=type(error).__name__,
            error=str(error),
            details=details,
            user_message=message
        )
        self._set_state(self._state.with_error(message), trigger="generate_failed")
        return GenerationResult.FAILED

    def _set_state(self, new_state: LifecycleState, trigger: str,
                   context: Optional[dict] = None) -> None:
        validate_transition(self._state.view, new_state.view, trigger, context)
        self._state = new_state
        self._revision += 1
        self._notify()

    def _notify(self) -> None:
        for callback in list(self._subscribers):
            try:
                callback(self._state)
            except Exception:
                self.logger.exception("State subscriber failed")
