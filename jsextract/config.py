import os
from dataclasses import dataclass

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off"})


def _read_env_str(name: str, default: str) -> str:
    """Read env var as a non-empty string; return default if unset or blank."""
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw


def _read_env_bool(name: str, default: bool) -> bool:
    """Read env var as a boolean flag; return default if unset or unrecognised."""
    raw = os.getenv(name)
    if raw is None:
        return default
    lowered = raw.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    return default


@dataclass(frozen=True)
class ExtractorConfig:
    """Options for extract_script_json. Overridable via JSEXTRACT_* env vars."""

    # Pattern prefix that switches extract_script_json into RSC mode
    rsc_prefix: str = "@nextjs_rsc:"
    # Re-decode UTF-8 mis-read as Latin-1 in every string of the result
    fix_mojibake: bool = False
    # Joins several selected scripts before a variable is searched for
    script_separator: str = "\n"

    @classmethod
    def from_env(cls) -> "ExtractorConfig":
        """Build config from JSEXTRACT_* env vars, falling back to defaults."""
        return cls(
            rsc_prefix=_read_env_str("JSEXTRACT_RSC_PREFIX", "@nextjs_rsc:"),
            fix_mojibake=_read_env_bool("JSEXTRACT_FIX_MOJIBAKE", False),
            script_separator=os.getenv("JSEXTRACT_SCRIPT_SEPARATOR", "\n"),
        )
