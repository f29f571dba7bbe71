class LoadError(Exception):
    """Raised when a graph description cannot be fetched."""


class ParseError(LoadError):
    """Raised when a fetched graph description is not valid JSON or has the wrong shape."""
