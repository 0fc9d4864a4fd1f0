"""Error types raised by the deduplication engine."""


class DedupeError(Exception):
    """Base class for all deduplication errors."""


class OptionsError(DedupeError, ValueError):
    """Raised when an options mapping cannot be turned into DedupeOptions."""

    def __init__(self, message: str, key: str | None = None):
        self.key = key
        super().__init__(message)


class UnknownNodeError(DedupeError, TypeError):
    """Raised when the tree holds an object that is not a style node."""

    def __init__(self, node: object):
        self.node = node
        super().__init__(f"Unsupported style node: {type(node).__name__}")
