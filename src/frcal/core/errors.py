class FrcalError(Exception):
    """Base error."""

class InvalidCalendarComponents(FrcalError, ValueError):
    """Month or day outside the valid bounds of the FRC date being converted."""

class OutOfRange(FrcalError, IndexError):
    """Year, offset or JDN outside the span of a precomputed leap table."""

class InvalidGregorianSource(FrcalError, ValueError):
    """The Gregorian date used to seed a conversion is itself invalid."""

class ClockUnavailable(FrcalError, RuntimeError):
    """The host clock cannot resolve a local date for 'today'."""

class UnknownEngine(FrcalError, KeyError):
    """No engine is registered under the requested name."""
