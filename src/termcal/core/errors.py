class TermcalError(Exception):
    """Base error."""

class UsageError(TermcalError, ValueError):
    """Raised when command-line input or calendar options are invalid."""
