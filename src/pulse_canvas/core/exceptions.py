"""
Exceptions raised by Pulse Canvas.

Only configuration problems are reported through this hierarchy. Failures of
the drawing surface or the host timer propagate unchanged to the caller.
"""

from typing import Optional


class PulseError(Exception):
    """Base exception for pulse-related errors."""

    def __init__(self, message: str, field: Optional[str] = None):
        self.message = message
        self.field = field
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        if self.field:
            return f"{self.message} [Field: {self.field}]"
        return self.message


class InvalidConfiguration(PulseError):
    """Raised when a pulse configuration cannot produce a drawable waveform."""

    def __init__(self, message: str, field: Optional[str] = None,
                 value: Optional[object] = None):
        self.value = value
        super().__init__(message, field)

    def _format_message(self) -> str:
        base = super()._format_message()
        if self.value is not None:
            return f"{base} [Value: {self.value!r}]"
        return base
