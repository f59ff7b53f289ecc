# =============================================================================
# core/services/speech_service.py - Mascot Speech Business Logic
# =============================================================================
# Ad hoc speech generation plus the "speech of the day": a single global
# slot that holds one model-written line per calendar day (UTC).
# =============================================================================

import logging
import threading
from dataclasses import dataclass
from datetime import date
from typing import Callable

from agents.fallbacks import fallback_daily_speech
from agents.speech_writer import SpeechWriterAgent
from core.models.speech import DailySpeechResponse, SpeechRequest, SpeechResponse, SpeechSource
from lib.utils import utc_now

logger = logging.getLogger(__name__)


def utc_today() -> date:
    return utc_now().date()


@dataclass
class _DailySlot:
    day: date
    speech: str
    source: SpeechSource


class DailySpeechCache:
    """
    One-slot, one-day memo for the daily speech.

    Only model-written speeches are stored. When the model fails, the
    day's canned speech is returned uncached so the next request retries.

    At most one generation runs per day at a time. Requests arriving while
    it is in flight wait for that result instead of calling the model too.
    The lock only guards the slot and is never held across a model call.

    Example:
        cache = DailySpeechCache()
        first = cache.get(writer)   # calls the model
        again = cache.get(writer)   # same speech, cached=True
    """

    def __init__(self, today: Callable[[], date] = utc_today):
        self._today = today
        self._slot: _DailySlot | None = None
        self._lock = threading.Lock()
        self._in_flight: tuple[date, threading.Event] | None = None

    def _cached(self, day: date) -> DailySpeechResponse | None:
        if self._slot is not None and self._slot.day == day:
            return DailySpeechResponse(
                date=day,
                speech=self._slot.speech,
                source=self._slot.source,
                cached=True,
            )
        return None

    def get(self, writer: SpeechWriterAgent) -> DailySpeechResponse:
        day = self._today()
        with self._lock:
            cached = self._cached(day)
            if cached is not None:
                return cached
            if self._in_flight is not None and self._in_flight[0] == day:
                pending = self._in_flight[1]
            else:
                pending = None
                done = threading.Event()
                self._in_flight = (day, done)

        if pending is not None:
            pending.wait()
            with self._lock:
                cached = self._cached(day)
            return cached if cached is not None else self._fallback(day)

        speech = None
        try:
            speech = writer.write_daily(day)
        finally:
            with self._lock:
                if speech:
                    self._slot = _DailySlot(day=day, speech=speech, source=SpeechSource.LLM)
                self._in_flight = None
            done.set()

        if speech:
            logger.info(f"Daily speech generated for {day.isoformat()}")
            return DailySpeechResponse(date=day, speech=speech, source=SpeechSource.LLM)
        return self._fallback(day)

    @staticmethod
    def _fallback(day: date) -> DailySpeechResponse:
        logger.warning(f"Daily speech for {day.isoformat()} falling back to canned line")
        return DailySpeechResponse(
            date=day,
            speech=fallback_daily_speech(day),
            source=SpeechSource.FALLBACK,
        )

    def clear(self) -> None:
        with self._lock:
            self._slot = None


# Process-wide slot shared by all requests
daily_speech_cache = DailySpeechCache()


class SpeechService:
    """Service for mascot speech generation."""

    @staticmethod
    def generate(
        request: SpeechRequest,
        writer: SpeechWriterAgent | None = None,
    ) -> SpeechResponse:
        """Generate request.count lines, tailored to request.context if given."""
        writer = writer or SpeechWriterAgent()
        speeches, source = writer.write(count=request.count, context=request.context)
        logger.info(f"Generated {len(speeches)} speech line(s) from {source.value}")
        return SpeechResponse(speeches=speeches, source=source)

    @staticmethod
    def get_daily(
        writer: SpeechWriterAgent | None = None,
        cache: DailySpeechCache | None = None,
    ) -> DailySpeechResponse:
        """Return today's speech, generating it on the first call of the day."""
        cache = cache or daily_speech_cache
        return cache.get(writer or SpeechWriterAgent())
