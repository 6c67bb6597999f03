"""
Resolve the value assigned to a declared variable inside a script.

    var jobs = JSON.parse('[{\\x22id\\x22:1}]');   -> Structured([{"id": 1}])
    const config = {"debug": true};             -> Structured({"debug": True})
    let title = "Hello";                        -> Structured("Hello")
    var expr = someFunction();                  -> RawText("someFunction()")

Matching is a literal search for "<pattern> = "; the first occurrence wins and
scope is ignored. Once the assignment is found the resolver always returns a
value, falling back to the raw right-hand side when it is not JSON.
"""

import logging

from jsextract.decode.repair import parse_lenient
from jsextract.decode.scanner import extract_statement_value
from jsextract.errors import MalformedEscape, UnsupportedLiteral, VariableNotFound
from jsextract.extract.json_parse import JSON_PARSE_PREFIX, extract_json_parse_argument
from models import RawText, Structured

logger = logging.getLogger(__name__)


def extract_variable(script: str, pattern: str) -> Structured | RawText:
    """
    Return the value assigned by `<pattern> = ...` in `script`.

    `pattern` is the declaration prefix, e.g. "var jobs" or "const data".
    Raises VariableNotFound when the assignment does not occur.
    """
    needle = f"{pattern.strip()} = "
    start = script.find(needle)
    if start < 0:
        raise VariableNotFound(pattern)

    remaining = script[start + len(needle) :]

    candidate = remaining.lstrip()
    if candidate.startswith(JSON_PARSE_PREFIX):
        try:
            return extract_json_parse_argument(candidate)
        except (UnsupportedLiteral, MalformedEscape) as exc:
            logger.debug("'%s': JSON.parse argument not decodable (%s), using raw value", pattern, exc)

    value_text = extract_statement_value(remaining).strip()

    parsed = parse_lenient(value_text)
    if parsed is not None:
        return parsed
    return RawText(text=value_text)
