"""
Outcome Types

Build outcomes and the per-outcome notification policy.
"""

from dataclasses import dataclass
from enum import Enum


class Outcome(Enum):
    """Terminal status of the build being reported on."""
    SUCCESS = "success"
    FAILURE = "failure"
    UNSTABLE = "unstable"
    ABORTED = "aborted"

    @classmethod
    def parse(cls, value) -> "Outcome":
        """
        Parse an outcome from a host-supplied value.

        Accepts Outcome members and case-insensitive names or values
        (e.g. "SUCCESS", "failure").

        Raises:
            ValueError: if the value names no known outcome
        """
        if isinstance(value, cls):
            return value
        text = str(value or "").strip().lower()
        for member in cls:
            if text == member.value:
                return member
        raise ValueError(f"Unknown build outcome: {value!r}")

    @property
    def label(self) -> str:
        """Past-tense verb used in titles and messages."""
        return _LABELS[self]


_LABELS = {
    Outcome.SUCCESS: "Succeeded",
    Outcome.FAILURE: "Failed",
    Outcome.UNSTABLE: "Unstable",
    Outcome.ABORTED: "Aborted",
}


@dataclass(frozen=True)
class NotifyPolicy:
    """Which outcomes produce a notification."""

    notify_on_success: bool = True
    notify_on_failure: bool = True
    notify_on_unstable: bool = True
    notify_on_aborted: bool = False

    def enabled_for(self, outcome: Outcome) -> bool:
        """Look up the flag matching the outcome."""
        if outcome == Outcome.SUCCESS:
            return self.notify_on_success
        elif outcome == Outcome.FAILURE:
            return self.notify_on_failure
        elif outcome == Outcome.UNSTABLE:
            return self.notify_on_unstable
        return self.notify_on_aborted
