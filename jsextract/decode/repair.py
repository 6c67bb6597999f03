"""
JSON repair and lenient loading.

Scripts copied out of HTML often hold JSON that is valid except for raw
newlines or tabs inside string values (multi-line descriptions pasted into a
template). `repair_control_chars` escapes those so `json.loads` accepts the
text; `parse_lenient` tries the text as-is first and the repaired text second.
"""

import json
import unicodedata

from models import Structured

_CONTROL_ESCAPES: dict[str, str] = {
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
}


def repair_control_chars(text: str) -> str:
    """
    Escape raw control characters found inside string spans of near-valid JSON.

    String spans are tracked with a plain quote toggle; an escape pair is
    copied through untouched. Inside a string, newline/CR/tab become their
    two-character escapes and every other control character is dropped.
    Control characters outside strings are left alone. Idempotent.
    """
    fixed: list[str] = []
    in_string = False
    escape_next = False

    for ch in text:
        if escape_next:
            fixed.append(ch)
            escape_next = False
            continue
        if ch == "\\":
            fixed.append(ch)
            escape_next = True
            continue
        if ch == '"':
            in_string = not in_string
            fixed.append(ch)
            continue

        if in_string and unicodedata.category(ch) == "Cc":
            replacement = _CONTROL_ESCAPES.get(ch)
            if replacement is not None:
                fixed.append(replacement)
            continue

        fixed.append(ch)

    return "".join(fixed)


def parse_lenient(text: str) -> Structured | None:
    """Parse `text` as JSON, retrying once after repair. None when both fail."""
    value = _strict_loads(text)
    if value is not None:
        return value
    return _strict_loads(repair_control_chars(text))


def compact_json(text: str) -> str:
    """
    Re-serialise `text` as compact JSON when it parses (directly or after
    repair); otherwise return it unchanged. Keys come out sorted.
    """
    trimmed = text.strip()
    parsed = parse_lenient(trimmed)
    if parsed is None:
        return text
    return json.dumps(parsed.value, separators=(",", ":"), ensure_ascii=False, sort_keys=True)


def _reject_constant(name: str) -> None:
    raise ValueError(f"Non-standard JSON constant: {name}")


def _strict_loads(text: str) -> Structured | None:
    # Nesting past the interpreter recursion limit counts as unparseable
    try:
        return Structured(value=json.loads(text, parse_constant=_reject_constant))
    except (ValueError, RecursionError):
        return None
