"""
Error taxonomy for script value extraction.

Only three conditions are surfaced to callers. Everything else (unbalanced
regions, content that is not JSON) degrades to a RawText value or a skipped
candidate instead of raising.
"""


class ExtractionError(ValueError):
    """Base class for every error raised by jsextract."""


class MalformedEscape(ExtractionError):
    """A \\x or \\u escape is truncated or encodes an invalid code point."""

    def __init__(self, sequence: str, reason: str = "Malformed escape") -> None:
        self.sequence = sequence
        super().__init__(f"{reason}: {sequence!r}")


class VariableNotFound(ExtractionError):
    """The `<pattern> = ` assignment does not occur in the script."""

    def __init__(self, pattern: str) -> None:
        self.pattern = pattern
        super().__init__(f"Variable pattern '{pattern}' not found")


class UnsupportedLiteral(ExtractionError):
    """JSON.parse( is not followed by a single- or double-quoted string."""

    def __init__(self, found: str | None) -> None:
        self.found = found
        if found is None:
            message = "Expected ' or \" after JSON.parse(, got end of input"
        else:
            message = f"Expected ' or \" after JSON.parse(, got: {found!r}"
        super().__init__(message)
