import logging

from jsextract.decode.escapes import decode_literal
from jsextract.decode.repair import parse_lenient
from jsextract.errors import UnsupportedLiteral
from models import RawText, Structured

logger = logging.getLogger(__name__)

JSON_PARSE_PREFIX = "JSON.parse("


def extract_json_parse_argument(text: str) -> Structured | RawText:
    """
    Decode the string argument of a `JSON.parse('...')` / `JSON.parse("...")` call.

    `text` must start with `JSON.parse(`. The quoted argument is read up to its
    unescaped closing quote (or end of input when the literal is unterminated),
    escape-decoded, and parsed as JSON. When the decoded text is not JSON, even
    after repair, it is returned as RawText.

    Raises UnsupportedLiteral when the argument is not a quoted string, and
    MalformedEscape when the argument holds a broken \\x or \\u escape.
    """
    if not text.startswith(JSON_PARSE_PREFIX):
        raise UnsupportedLiteral(text[:1] or None)

    after = text[len(JSON_PARSE_PREFIX) :]
    if not after:
        raise UnsupportedLiteral(None)
    quote = after[0]
    if quote not in "'\"":
        raise UnsupportedLiteral(quote)

    decoded = decode_literal(_read_quoted_body(after, quote))

    parsed = parse_lenient(decoded)
    if parsed is not None:
        return parsed
    logger.debug("JSON.parse argument is not JSON, keeping %d chars as raw text", len(decoded))
    return RawText(text=decoded)


def _read_quoted_body(after: str, quote: str) -> str:
    """Body between the opening quote at after[0] and the matching unescaped quote."""
    escape_next = False
    for i in range(1, len(after)):
        ch = after[i]
        if escape_next:
            escape_next = False
            continue
        if ch == "\\":
            escape_next = True
            continue
        if ch == quote:
            return after[1:i]
    # Unterminated literal: everything up to end of input is the argument
    return after[1:]
