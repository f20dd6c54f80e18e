"""Error kinds raised by the jobs API client."""


class ApiError(Exception):
    """Base class for failures talking to the jobs backend."""


class NetworkFailure(ApiError):
    """The transport failed before any HTTP status was received."""


class RequestFailed(ApiError):
    """The backend answered with a status outside 2xx."""

    def __init__(self, status: int, message: str = ""):
        self.status = status
        super().__init__(message or f"Request failed. Status: {status}")


class DecodeFailure(ApiError):
    """The response body was not JSON or not the expected shape."""


class RequestCancelled(Exception):
    """The caller cancelled the request; its result must be dropped."""
