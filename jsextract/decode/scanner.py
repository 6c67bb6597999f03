"""
Bracket-tracking scanners over JavaScript-ish text.

Two primitives:
  extract_statement_value  -- from just after `=` to the end of the statement
  scan_balanced_region     -- from an opening { or [ to its matching close

Neither understands JavaScript beyond strings, escapes and bracket depth.
"""

from enum import Enum, auto

# A line starting with one of these continues the expression above it.
_CONTINUATION_CHARS = frozenset(".,+-*/")


class QuoteConvention(Enum):
    """How string delimiters appear in the text being scanned."""

    LITERAL = "literal"
    # Payload nested inside another string, so every " was written as \"
    ESCAPED_QUOTES = "escaped_quotes"


class _ScanState(Enum):
    NORMAL = auto()
    IN_STRING = auto()
    ESCAPE_PENDING = auto()


def extract_statement_value(text: str) -> str:
    """
    Return the right-hand side of an assignment whose text starts at `text[0]`.

    Stops at the first `;` at brace/bracket depth zero outside a string, at a
    depth-zero newline not followed by a continuation line, or at end of
    input. The terminator is not included.

    Example:
        ```python
        extract_statement_value('{"a": "x;y"}; var b = 2;')  # '{"a": "x;y"}'
        extract_statement_value("1\\n  + 2\\nfoo()")           # '1\\n  + 2'
        ```
    """
    state = _ScanState.NORMAL
    resume_state = _ScanState.NORMAL
    quote = ""
    brace_depth = 0
    bracket_depth = 0

    for i, ch in enumerate(text):
        if state is _ScanState.ESCAPE_PENDING:
            state = resume_state
            continue

        if ch == "\\":
            resume_state = state
            state = _ScanState.ESCAPE_PENDING
            continue

        if state is _ScanState.IN_STRING:
            if ch == quote:
                state = _ScanState.NORMAL
            continue

        if ch in "\"'":
            state = _ScanState.IN_STRING
            quote = ch
            continue

        if ch == "{":
            brace_depth += 1
        elif ch == "}":
            brace_depth -= 1
        elif ch == "[":
            bracket_depth += 1
        elif ch == "]":
            bracket_depth -= 1
        elif brace_depth == 0 and bracket_depth == 0:
            if ch == ";":
                return text[:i]
            if ch == "\n" and not _continues_on_next_line(text, i + 1):
                return text[:i]

    return text


def scan_balanced_region(
    text: str, convention: QuoteConvention = QuoteConvention.LITERAL
) -> str | None:
    """
    Return the shortest prefix of `text` that closes the { or [ at `text[0]`.

    Under LITERAL, an unescaped " toggles string state and any backslash pair
    is skipped as a unit. Under ESCAPED_QUOTES, the two-character token \\"
    toggles string state and, inside a string, \\\\ is skipped as a unit.
    Outside strings every { or [ opens and every } or ] closes one shared
    depth counter.

    Returns None when `text` does not start with { or [, or when input runs
    out before depth returns to zero.
    """
    if not text or text[0] not in "{[":
        return None

    escaped_quotes = convention is QuoteConvention.ESCAPED_QUOTES
    depth = 0
    in_string = False
    i = 0
    n = len(text)

    while i < n:
        ch = text[i]

        if escaped_quotes:
            if text.startswith('\\"', i):
                in_string = not in_string
                i += 2
                continue
            if in_string:
                i += 2 if text.startswith("\\\\", i) else 1
                continue
        else:
            if ch == "\\":
                i += 2
                continue
            if ch == '"':
                in_string = not in_string
                i += 1
                continue
            if in_string:
                i += 1
                continue

        if ch in "{[":
            depth += 1
        elif ch in "}]":
            depth -= 1
            if depth == 0:
                return text[: i + 1]
        i += 1

    return None


def _continues_on_next_line(text: str, start: int) -> bool:
    i = start
    n = len(text)
    while i < n and text[i].isspace():
        i += 1
    return i < n and text[i] in _CONTINUATION_CHARS
