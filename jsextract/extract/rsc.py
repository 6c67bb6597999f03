"""
Locate objects carrying a given key inside React Server Component payloads.

Next.js streams page data as string arguments to `self.__next_f.push([1, "..."])`.
Depending on how the push call was written, the payload's own quotes appear
either literally ("key":) or escaped once more (\\"key\\":). Both forms are
searched; every enclosing object that still has the key after decoding is
returned, in order of appearance per form, without deduplication.
"""

import logging

from jsextract.decode.escapes import decode_literal
from jsextract.decode.repair import parse_lenient
from jsextract.decode.scanner import QuoteConvention, scan_balanced_region
from jsextract.errors import MalformedEscape
from models import RscMatch, Structured

logger = logging.getLogger(__name__)


def find_rsc_matches(script: str, json_key: str) -> list[RscMatch]:
    """Return one RscMatch per payload object containing `json_key`. Never raises."""
    key_patterns = (
        (f'\\"{json_key}\\":', QuoteConvention.ESCAPED_QUOTES),
        (f'"{json_key}":', QuoteConvention.LITERAL),
    )

    matches: list[RscMatch] = []
    for key_pattern, convention in key_patterns:
        idx = 0
        while True:
            found = script.find(key_pattern, idx)
            if found < 0:
                break
            idx = found + len(key_pattern)

            value = _object_around(script, found, json_key, convention)
            if value is not None:
                matches.append(RscMatch(json_key=json_key, value=value))

    return matches


def extract_rsc_payloads(script: str, json_key: str) -> list[Structured]:
    """Values of `find_rsc_matches`; empty list when nothing matches."""
    return [match.value for match in find_rsc_matches(script, json_key)]


def _object_around(
    script: str, key_pos: int, json_key: str, convention: QuoteConvention
) -> Structured | None:
    start = _enclosing_object_start(script, key_pos)
    if start is None:
        return None

    region = scan_balanced_region(script[start:], convention)
    if region is None:
        logger.debug("RSC candidate for '%s' at %d is unbalanced, skipping", json_key, start)
        return None

    if convention is QuoteConvention.ESCAPED_QUOTES:
        region = region.replace('\\"', '"')

    try:
        decoded = decode_literal(region)
    except MalformedEscape as exc:
        logger.debug("RSC candidate for '%s' at %d has a bad escape: %s", json_key, start, exc)
        return None

    parsed = parse_lenient(decoded)
    if parsed is None:
        logger.debug("RSC candidate for '%s' at %d is not JSON, skipping", json_key, start)
        return None
    # Decoding can shift quotes so the key no longer belongs to this object
    if not isinstance(parsed.value, dict) or json_key not in parsed.value:
        return None
    return parsed


def _enclosing_object_start(text: str, pos: int) -> int | None:
    """Walk backwards from `pos` over balanced {} pairs to the unmatched {."""
    depth = 0
    for i in range(pos - 1, -1, -1):
        ch = text[i]
        if ch == "}":
            depth += 1
        elif ch == "{":
            if depth == 0:
                return i
            depth -= 1
    return None
