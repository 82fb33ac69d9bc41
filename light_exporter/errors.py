class UpstreamError(RuntimeError):
    """Base class for failures while collecting light statuses."""


class FetchError(UpstreamError):
    """The controller response (or the mock file) could not be read."""


class ParseError(UpstreamError):
    """A matched line carried an index or brightness that is not a usable integer."""
