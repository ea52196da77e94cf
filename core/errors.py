"""ID errors with context for tracking."""

from utils.timestamp import format_timestamp


class BaseIdError(Exception):
    """Base error with context and timestamp for tracking."""

    def __init__(self, message, context=None, cause=None):
        super().__init__(message)
        self.timestamp = format_timestamp()
        self.context = context or {}
        self.cause = cause

    def to_dict(self):
        return {
            "error": type(self).__name__,
            "msg": str(self),
            "timestamp": self.timestamp,
            "context": self.context,
        }


class InvalidCharacter(BaseIdError, ValueError):
    """Decode hit a character outside the alphabet."""

    def __init__(self, message, character=None, position=None, **kwargs):
        context = kwargs.pop("context", {})
        if character is not None:
            context["character"] = character
        if position is not None:
            context["position"] = position
        super().__init__(message, context=context, **kwargs)


class InvalidLength(BaseIdError, ValueError):
    """Input length does not match the expected bit width."""

    def __init__(self, message, expected=None, actual=None, **kwargs):
        context = kwargs.pop("context", {})
        if expected is not None:
            context["expected"] = expected
        if actual is not None:
            context["actual"] = actual
        super().__init__(message, context=context, **kwargs)


class SecureRandomUnavailable(BaseIdError, RuntimeError):
    """No cryptographically secure random source could be read."""

    def __init__(self, message, source=None, **kwargs):
        context = kwargs.pop("context", {})
        if source:
            context["source"] = source
        super().__init__(message, context=context, **kwargs)
