"""
JavaScript string-literal escape decoding.

Input is the *body* of a literal (no enclosing quotes) as it was copied out of
a rendered page. The decoder is deliberately looser than JSON: `\\-` and `\\/`
are accepted, unknown escapes such as `\\q` collapse to the bare letter, and
the double-escaped `\\\\uXXXX` form seen in pages that JSON-encode twice is
decoded like a plain unicode escape.
"""

from jsextract.errors import MalformedEscape

_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")

_SIMPLE_ESCAPES: dict[str, str] = {
    "n": "\n",
    "r": "\r",
    "t": "\t",
    '"': '"',
    "'": "'",
    "b": "\b",
    "f": "\f",
    "v": "\v",
    "0": "\0",
    # Not valid JSON, but JavaScript tolerates them
    "-": "-",
    "/": "/",
}


def decode_literal(body: str) -> str:
    """
    Decode the escape sequences in a JavaScript string-literal body.

    Raises MalformedEscape when a \\x or \\u escape is truncated, contains
    non-hex digits, or encodes an invalid code point. Any other input decodes.

    Example:
        ```python
        decode_literal(r"[\\x22Salary\\x22:\\x2250000$ \\- 80000$\\x22]")
        # '["Salary":"50000$ - 80000$"]'
        ```
    """
    out: list[str] = []
    i = 0
    n = len(body)

    while i < n:
        ch = body[i]
        if ch != "\\":
            out.append(ch)
            i += 1
            continue

        if i + 1 >= n:
            # Trailing lone backslash
            out.append("\\")
            break

        nxt = body[i + 1]
        if nxt == "x":
            out.append(chr(_read_hex(body, i + 2, 2, "\\x")))
            i += 4
        elif nxt == "u":
            char, i = _read_unicode(body, i + 2, "\\u")
            out.append(char)
        elif nxt == "\\":
            if i + 2 < n and body[i + 2] == "u":
                char, i = _read_unicode(body, i + 3, "\\\\u")
                out.append(char)
            else:
                out.append("\\")
                i += 2
        else:
            out.append(_SIMPLE_ESCAPES.get(nxt, nxt))
            i += 2

    return "".join(out)


def fix_mojibake(text: str) -> str:
    """
    Undo UTF-8 text that was mis-read as Latin-1 ("FranÃ§ais" -> "Français").

    Returns the input unchanged when it cannot be mojibake: a character above
    U+00FF is present, or the Latin-1 bytes are not valid UTF-8.
    """
    try:
        return text.encode("latin-1").decode("utf-8")
    except (UnicodeEncodeError, UnicodeDecodeError):
        return text


def _read_hex(text: str, start: int, width: int, prefix: str) -> int:
    digits = text[start : start + width]
    if len(digits) < width:
        raise MalformedEscape(prefix + digits, "Incomplete escape")
    if not all(d in _HEX_DIGITS for d in digits):
        raise MalformedEscape(prefix + digits, "Invalid escape")
    return int(digits, 16)


def _read_unicode(text: str, start: int, prefix: str) -> tuple[str, int]:
    """Read four hex digits at `start`; return the character and the index after it."""
    code = _read_hex(text, start, 4, prefix)
    end = start + 4
    # Each escape is one scalar value, so surrogate halves are never valid
    if 0xD800 <= code <= 0xDFFF:
        raise MalformedEscape(prefix + text[start:end], "Invalid unicode code point")
    return chr(code), end
