"""
Dispatch Tracking

Records the state transitions of one dispatch invocation, mirrors them into
Sentry breadcrumbs and flags slow stages.
"""

import logging
import time
from typing import Any, List, Optional, Tuple

from ..models.notification import DispatchState
from .sentry.setup import add_breadcrumb

logger = logging.getLogger(__name__)


class DispatchTracker:
    """
    Tracks the dispatch state machine for one invocation.

    Usage:
        tracker = DispatchTracker()
        with tracker.stage(DispatchState.SENDING):
            response = transport.send(topic, request, token)
        tracker.finish(DispatchState.SUCCEEDED)
    """

    def __init__(self, slow_stage_seconds: float = 10.0):
        self.slow_stage_seconds = slow_stage_seconds
        self.state = DispatchState.IDLE
        self.transitions: List[Tuple[DispatchState, DispatchState]] = []
        self.durations: List[Tuple[DispatchState, float]] = []

    def transition(self, state: DispatchState) -> None:
        """Move to state. Terminal states cannot be left."""
        if self.state.terminal:
            raise RuntimeError(f"Dispatch already finished in state {self.state.value}")

        previous = self.state
        self.state = state
        self.transitions.append((previous, state))

        logger.debug("Dispatch %s -> %s", previous.value, state.value)
        add_breadcrumb(
            message=f"{previous.value} -> {state.value}",
            category="dispatch",
            level="error" if state == DispatchState.FAILED else "info",
        )

    def stage(self, state: DispatchState) -> "_StageContext":
        """Context manager entering state and failing the dispatch on error."""
        return _StageContext(self, state)

    def finish(self, state: DispatchState) -> None:
        if not state.terminal:
            raise ValueError(f"{state.value} is not a terminal state")
        self.transition(state)

    def _record(self, state: DispatchState, duration: float) -> None:
        self.durations.append((state, duration))
        if duration > self.slow_stage_seconds:
            logger.warning(
                "%s took %.2f seconds (threshold: %.2f)",
                state.value,
                duration,
                self.slow_stage_seconds,
            )

    @property
    def visited(self) -> List[DispatchState]:
        """States entered so far, in order."""
        return [new for _, new in self.transitions]


class _StageContext:
    def __init__(self, tracker: DispatchTracker, state: DispatchState):
        self.tracker = tracker
        self.state = state
        self._start_time: Optional[float] = None

    def __enter__(self) -> DispatchTracker:
        self.tracker.transition(self.state)
        self._start_time = time.time()
        return self.tracker

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> bool:
        duration = time.time() - (self._start_time or time.time())
        self.tracker._record(self.state, duration)

        if exc_val is not None:
            add_breadcrumb(
                message=f"Stage failed: {self.state.value} - {exc_type.__name__}",
                category="dispatch",
                level="error",
                data={"duration_seconds": duration},
            )
            self.tracker.finish(DispatchState.FAILED)

        # Don't suppress the exception
        return False
