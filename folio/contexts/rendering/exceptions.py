"""Custom exceptions for the rendering context."""


class BackendInitError(OSError):
    """
    Exception raised when the paint backend cannot be constructed.

    Startup failures are fatal: callers report them and exit, nothing is retried.
    """

    pass
