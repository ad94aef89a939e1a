"""Error taxonomy for the outlook pipeline."""


class OutlookError(Exception):
    """Base class for failures surfaced to the caller."""

    status_code: int = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidRequestError(OutlookError):
    """Missing or out-of-range request input. Raised before any computation."""

    status_code = 400


class InsufficientDataError(OutlookError):
    """Historical record has too few valid points to fit a trend."""

    status_code = 422


class UpstreamFetchError(OutlookError):
    """Dataset source unreachable, failing, or returning an unusable payload."""

    status_code = 502

    def __init__(self, message: str, upstream_status: int | None = None):
        super().__init__(message)
        self.upstream_status = upstream_status
