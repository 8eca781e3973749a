"""Lifecycle state machine errors."""

from typing import Optional

from .base import FortuneAppError


class StateTransitionError(FortuneAppError):
    """Attempted a view transition the lifecycle does not allow."""

    def __init__(self, message: str, current_view: Optional[str] = None,
                 attempted_view: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.current_view = current_view
        self.attempted_view = attempted_view
