"""
View transition rules.

Legal moves between lifecycle views. FORTUNE → LOADING is deliberately
absent: one fortune per calendar day.
"""

from typing import Optional

from ..errors import StateTransitionError
from ..logging.config import get_state_logger, log_state_transition
from .models import FortuneView

ALLOWED_TRANSITIONS: dict[FortuneView, frozenset[FortuneView]] = {
    FortuneView.INITIAL: frozenset({FortuneView.INITIAL, FortuneView.LOADING, FortuneView.FORTUNE}),
    FortuneView.LOADING: frozenset({FortuneView.INITIAL, FortuneView.FORTUNE}),
    # FORTUNE → INITIAL only happens when reconcile finds the record stale
    FortuneView.FORTUNE: frozenset({FortuneView.FORTUNE, FortuneView.INITIAL}),
}


def can_transition(current: FortuneView, target: FortuneView) -> bool:
    """Whether ``current`` → ``target`` is a legal view change."""
    return target in ALLOWED_TRANSITIONS[current]


def validate_transition(
    current: FortuneView,
    target: FortuneView,
    trigger: str,
    context: Optional[dict] = None
) -> None:
    """
    Check and log a view transition.

    Raises:
        StateTransitionError: If the transition is not allowed
    """
    state_logger = get_state_logger(__name__)

    if not can_transition(current, target):
        state_logger.error(
            "Illegal view transition",
            from_view=current.value,
            to_view=target.value,
            trigger=trigger
        )
        raise StateTransitionError(
            f"Cannot move from {current.value} to {target.value} on {trigger}",
            current_view=current.value,
            attempted_view=target.value
        )

    if current != target:
        log_state_transition(
            state_logger,
            from_view=current.value,
            to_view=target.value,
            trigger=trigger,
            context=context
        )
