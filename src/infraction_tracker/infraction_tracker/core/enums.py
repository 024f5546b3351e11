from __future__ import annotations

from enum import Enum


class InfractionType(str, Enum):
    """Attendance infraction categories; the value is the persisted tag."""

    CALL_OUT_PRIOR = "Call Out (Prior to shift)"
    CALL_OUT_AFTER_START = "Call Out (After shift starts)"
    NO_CALL_NO_SHOW = "No Call / No Show"
    TARDY_UNDER_HOUR = "Tardy (16-59 min)"
    TARDY_OVER_HOUR = "Tardy (60+ min)"
    EARLY_DEPARTURE_UNDER_HOUR = "Early Departure (16-59 min)"
    EARLY_DEPARTURE_OVER_HOUR = "Early Departure (60+ min)"
    LATE_RETURN_UNDER_HOUR = "Late Return (16-59 min)"
    LATE_RETURN_OVER_HOUR = "Late Return (60+ min)"


DEFAULT_INFRACTION_TYPE = InfractionType.TARDY_UNDER_HOUR


class DisciplinaryStatus(str, Enum):
    """Status derived from an employee's point total (never stored)."""

    OK = "OK"
    FIRST_WRITTEN_WARNING = "First Written Warning"
    FINAL_WRITTEN_WARNING = "Final Written Warning"
    TERMINATION = "Termination"


class BadgeTone(str, Enum):
    OK = "ok"
    NEUTRAL = "neutral"
    WARN = "warn"
    DANGER = "danger"


class ThemeMode(str, Enum):
    DARK = "dark"
    LIGHT = "light"


class MutationResult(str, Enum):
    """Outcome of a record store mutation.

    Anything other than APPLIED means the state was left untouched.
    """

    APPLIED = "APPLIED"
    UNCHANGED = "UNCHANGED"
    DUPLICATE_IDENTIFIER = "DUPLICATE_IDENTIFIER"
    EMPTY_REQUIRED_FIELD = "EMPTY_REQUIRED_FIELD"
    INVALID_IDENTIFIER = "INVALID_IDENTIFIER"
    NOT_FOUND = "NOT_FOUND"


class UpdateState(str, Enum):
    """States reported by the host shell's auto-update bridge."""

    IDLE = "idle"
    CHECKING = "checking"
    NONE = "none"
    AVAILABLE = "available"
    DOWNLOADING = "downloading"
    READY = "ready"
    ERROR = "error"
