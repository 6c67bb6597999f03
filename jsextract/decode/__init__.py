from .escapes import decode_literal, fix_mojibake
from .repair import compact_json, parse_lenient, repair_control_chars
from .scanner import QuoteConvention, extract_statement_value, scan_balanced_region

__all__ = [
    "QuoteConvention",
    "compact_json",
    "decode_literal",
    "extract_statement_value",
    "fix_mojibake",
    "parse_lenient",
    "repair_control_chars",
    "scan_balanced_region",
]
