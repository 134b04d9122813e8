"""
Exception types raised by kfconsole and its collaborators.
"""


class KfConsoleError(Exception):
    """Base class for kfconsole errors."""


class InputSourceError(KfConsoleError):
    """Raised when the input channel can no longer deliver events.

    This is fatal for the event loop and propagates out of handle_input.
    """


class ForwardingError(KfConsoleError):
    """Raised when a port-forward could not be started or stopped."""

    def __init__(self, message: str, record_id=None):
        super().__init__(message)
        self.record_id = record_id


class RecordStoreError(KfConsoleError):
    """Raised when the record store fails to read or write records."""
