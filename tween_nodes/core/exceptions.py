"""Exception hierarchy for tween keyframes."""

from typing import Any, Dict, Optional


class TweenError(Exception):
    """Base error for the tween core. Carries a details dict for diagnostics."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} ({self.details})"
        return self.message


class InvalidEasingError(TweenError, KeyError):
    """Easing name outside the fixed registry."""

    def __init__(self, name: Any, **kwargs):
        details = kwargs.copy()
        details["easing_type"] = name
        super().__init__(f"Unknown easing type: {name!r}", details)


class TweenSerializationError(TweenError, ValueError):
    """Persisted tween or frame data is missing fields or malformed."""

    def __init__(self, message: str, field=None, **kwargs):
        details = kwargs.copy()
        if field:
            details["field"] = field
        super().__init__(message, details)


__all__ = [
    "TweenError",
    "InvalidEasingError",
    "TweenSerializationError",
]
