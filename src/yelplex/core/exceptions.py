"""Exception types raised by the yelplex pipeline."""


class YelplexError(Exception):
    """Base class for pipeline failures."""


class ReviewLoadError(YelplexError):
    """Raised when a review line cannot be parsed; aborts the whole load."""

    def __init__(self, line_number: int, reason: str):
        self.line_number = line_number
        self.reason = reason
        super().__init__(f"Malformed review at line {line_number}: {reason}")


class ResourceError(YelplexError):
    """Raised when the lexicon, stop-word list or review file is missing or unreadable."""

    def __init__(self, resource: str, reason: str):
        self.resource = resource
        self.reason = reason
        super().__init__(f"Cannot load {resource}: {reason}")
