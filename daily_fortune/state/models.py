"""
Lifecycle data models.

Immutable structures for the fortune itself, the persisted daily record
and the in-memory view state exposed to observers.
"""

import json
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from ..errors import StoreReadError


class FortuneView(str, Enum):
    """Which screen the presentation layer should show."""
    INITIAL = "initial"
    LOADING = "loading"
    FORTUNE = "fortune"


class GenerationResult(str, Enum):
    """Outcome of a generate() call."""
    GENERATED = "generated"
    FAILED = "failed"
    SKIPPED_IN_FLIGHT = "skipped_in_flight"
    SKIPPED_ALREADY_GENERATED = "skipped_already_generated"


@dataclass(frozen=True)
class Fortune:
    """A single generated fortune."""

    text: str
    generated_at: str                                # ISO-8601, UTC
    id: str

    def to_dict(self) -> dict[str, str]:
        return {
            "text": self.text,
            "generatedAt": self.generated_at,
            "id": self.id,
        }

    def to_json(self) -> str:
        return json.dumps(self.to_dict())

    @classmethod
    def from_dict(cls, data: Any) -> "Fortune":
        """
        Build a Fortune from its stored dictionary form.

        Raises:
            StoreReadError: If required fields are missing or mistyped
        """
        if not isinstance(data, dict):
            raise StoreReadError("Stored fortune is not an object")

        text = data.get("text")
        if not isinstance(text, str):
            raise StoreReadError("Stored fortune has no text")

        generated_at = data.get("generatedAt", "")
        fortune_id = data.get("id", "")
        return cls(
            text=text,
            generated_at=generated_at if isinstance(generated_at, str) else "",
            id=str(fortune_id),
        )

    @classmethod
    def from_json(cls, raw: str) -> "Fortune":
        """
        Parse a stored fortune.

        Raises:
            StoreReadError: If ``raw`` is not valid fortune JSON
        """
        try:
            data = json.loads(raw)
        except (TypeError, ValueError) as e:
            raise StoreReadError(
                f"Stored fortune is not valid JSON: {e}", raw_value=raw
            ) from e
        return cls.from_dict(data)


@dataclass(frozen=True)
class DailyRecord:
    """The persisted pairing of the latest fortune with its calendar day."""

    fortune: Fortune
    generation_date: str                             # YYYY-MM-DD


@dataclass(frozen=True)
class LifecycleState:
    """In-memory lifecycle snapshot handed to observers."""

    fortune: Optional[Fortune] = None
    view: FortuneView = FortuneView.INITIAL
    error: Optional[str] = None
    has_generated_today: bool = False

    @property
    def is_loading(self) -> bool:
        return self.view == FortuneView.LOADING

    def with_loading(self) -> 'LifecycleState':
        """Enter LOADING and clear any previous error."""
        return LifecycleState(
            fortune=self.fortune,
            view=FortuneView.LOADING,
            error=None,
            has_generated_today=self.has_generated_today
        )

    def with_fortune(self, fortune: Fortune) -> 'LifecycleState':
        """Show ``fortune`` as today's fortune."""
        return LifecycleState(
            fortune=fortune,
            view=FortuneView.FORTUNE,
            error=None,
            has_generated_today=True
        )

    def with_error(self, message: str) -> 'LifecycleState':
        """Back to INITIAL with ``message``; fortune fields are left as they were."""
        return LifecycleState(
            fortune=self.fortune,
            view=FortuneView.INITIAL,
            error=message,
            has_generated_today=self.has_generated_today
        )
