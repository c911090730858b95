"""Exception types raised by the log explorer."""


class LogExplorerError(Exception):
    """Base class for all log explorer errors."""


class LogLoadError(LogExplorerError, ValueError):
    """A log document could not be turned into a collection.

    Raised before the active collection is touched, so the previously
    loaded view stays usable.
    """
