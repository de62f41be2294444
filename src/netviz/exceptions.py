"""Custom exceptions for the :mod:`netviz` package."""


class NetvizError(Exception):
    """Base class for all custom ``netviz`` exceptions.

    Parameters
    ----------
    message:
        Short description of the failure.
    context:
        Optional additional information about where/why the error occurred.
    suggestion:
        Optional hint that may help recover from the error.
    """

    def __init__(
        self,
        message: str = "",
        *,
        context: str | None = None,
        suggestion: str | None = None,
    ) -> None:
        super().__init__(message)
        self.context = context
        self.suggestion = suggestion


class ConfigurationError(NetvizError):
    """Raised when a histogram is configured with invalid parameters."""


class CaptureReadError(NetvizError):
    """Raised when reading packets from a capture file fails."""


class CorruptCaptureError(CaptureReadError):
    """Raised when the capture file is corrupt or has an invalid format."""


class RenderError(NetvizError):
    """Raised when chart rendering fails."""
