"""Error taxonomy for the capture and query flows."""


class PhotoRelayError(Exception):
    """Base class for application errors."""


class CaptureError(PhotoRelayError):
    """The device camera failed to produce a photo."""


class UploadError(PhotoRelayError):
    """The backend did not acknowledge an upload with a task id."""


class AuthError(PhotoRelayError):
    """No authenticated identity could be resolved for a request."""


class PhotoNotFoundError(PhotoRelayError):
    """No photo exists for the user, or the requested one was superseded."""
