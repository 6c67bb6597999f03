"""
One entry point for pulling JSON out of already-selected <script> texts.

Three modes, chosen by `pattern`:
  None / ""              each script is a JSON document (LD+JSON); HTML
                         entities left in string values are decoded
  "<rsc_prefix><key>"    every RSC payload object holding <key>, across all scripts
  anything else          a variable pattern ("var jobs") resolved over the
                         joined scripts

Selecting the scripts out of the HTML is the caller's job.
"""

import html
import logging
from collections.abc import Callable
from typing import Any

from jsextract.config import ExtractorConfig
from jsextract.decode.escapes import fix_mojibake
from jsextract.decode.repair import parse_lenient
from jsextract.errors import VariableNotFound
from jsextract.extract.rsc import extract_rsc_payloads
from jsextract.extract.variables import extract_variable

logger = logging.getLogger(__name__)


def extract_script_json(
    scripts: list[str],
    pattern: str | None = None,
    *,
    config: ExtractorConfig | None = None,
) -> list[Any] | None:
    """
    Extract JSON-compatible values from `scripts`.

    Returns a non-empty list of plain Python values, or None when nothing was
    found. Never raises for content problems: a missing variable, an RSC key
    that never occurs, or scripts that are not JSON all yield None.

    Example:
        ```python
        extract_script_json(['var jobs = [1, 2];'], "var jobs")        # [[1, 2]]
        extract_script_json(['{"name": "Caf&eacute;"}'])                # [{"name": "Café"}]
        extract_script_json(scripts, "@nextjs_rsc:productDisplay")     # [{...}, {...}]
        ```
    """
    cfg = config or ExtractorConfig()

    if pattern and pattern.startswith(cfg.rsc_prefix):
        values = _rsc_values(scripts, pattern[len(cfg.rsc_prefix) :])
    elif pattern:
        values = _variable_values(cfg.script_separator.join(scripts), pattern)
    else:
        values = _document_values(scripts)

    if not values:
        return None
    if cfg.fix_mojibake:
        values = [_map_strings(value, fix_mojibake) for value in values]
    return values


def _rsc_values(scripts: list[str], json_key: str) -> list[Any]:
    values: list[Any] = []
    for script in scripts:
        values.extend(payload.as_python() for payload in extract_rsc_payloads(script, json_key))
    return values


def _variable_values(script: str, pattern: str) -> list[Any]:
    try:
        return [extract_variable(script, pattern).as_python()]
    except VariableNotFound as exc:
        logger.debug("%s", exc)
        return []


def _document_values(scripts: list[str]) -> list[Any]:
    values: list[Any] = []
    for script in scripts:
        trimmed = script.strip()
        if not trimmed:
            continue

        parsed = parse_lenient(trimmed)
        if parsed is not None:
            values.append(_map_strings(parsed.value, html.unescape))
            continue

        # Entities in structural positions (&quot; as a delimiter) break parsing
        parsed = parse_lenient(html.unescape(trimmed))
        if parsed is not None:
            values.append(parsed.value)
        else:
            logger.debug("Skipping script that is not JSON (%d chars)", len(trimmed))

    return values


def _map_strings(value: Any, transform: Callable[[str], str]) -> Any:
    """Apply `transform` to every string value (not keys) in a JSON tree."""
    if isinstance(value, str):
        return transform(value)
    if isinstance(value, list):
        return [_map_strings(item, transform) for item in value]
    if isinstance(value, dict):
        return {key: _map_strings(item, transform) for key, item in value.items()}
    return value
