from .config import ExtractorConfig
from .decode import QuoteConvention, decode_literal, fix_mojibake, repair_control_chars
from .errors import ExtractionError, MalformedEscape, UnsupportedLiteral, VariableNotFound
from .extract import (
    extract_json_parse_argument,
    extract_rsc_payloads,
    extract_script_json,
    extract_variable,
    find_rsc_matches,
)

__all__ = [
    "ExtractionError",
    "ExtractorConfig",
    "MalformedEscape",
    "QuoteConvention",
    "UnsupportedLiteral",
    "VariableNotFound",
    "decode_literal",
    "extract_json_parse_argument",
    "extract_rsc_payloads",
    "extract_script_json",
    "extract_variable",
    "find_rsc_matches",
    "fix_mojibake",
    "repair_control_chars",
]
