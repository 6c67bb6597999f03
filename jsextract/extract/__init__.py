from .json_parse import extract_json_parse_argument
from .rsc import extract_rsc_payloads, find_rsc_matches
from .script_json import extract_script_json
from .variables import extract_variable

__all__ = [
    "extract_json_parse_argument",
    "extract_rsc_payloads",
    "extract_script_json",
    "extract_variable",
    "find_rsc_matches",
]
