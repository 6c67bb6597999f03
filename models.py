import json
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, Field


class Structured(BaseModel):
    # A JSON-compatible value tree: None, bool, int/float, str, list, dict
    kind: Literal["structured"] = "structured"
    value: Any = None

    def to_json_string(self) -> str:
        return json.dumps(self.value, separators=(",", ":"), ensure_ascii=False)

    def as_python(self) -> Any:
        return self.value


class RawText(BaseModel):
    """Text that could not be parsed as JSON, preserved verbatim."""

    kind: Literal["raw"] = "raw"
    text: str

    def to_json_string(self) -> str:
        return json.dumps(self.text, ensure_ascii=False)

    def as_python(self) -> Any:
        return self.text


DecodedValue = Annotated[Union[Structured, RawText], Field(discriminator="kind")]


class RscMatch(BaseModel):
    """One RSC payload object found to contain `json_key` as a top-level member."""

    json_key: str
    value: DecodedValue


# ---------------------------------------------------------------------------
# HTTP request / response bodies
# ---------------------------------------------------------------------------

class DecodeRequest(BaseModel):
    body: str


class TextResponse(BaseModel):
    text: str


class VariableRequest(BaseModel):
    script: str
    pattern: str = Field(min_length=1)


class JsonParseRequest(BaseModel):
    text: str


class RscRequest(BaseModel):
    script: str
    json_key: str = Field(min_length=1)


class RepairRequest(BaseModel):
    text: str
    # Also re-serialise as compact JSON when the repaired text parses
    compact: bool = False


class ScriptJsonRequest(BaseModel):
    """
    Already-selected script texts plus an optional extraction pattern.

    pattern=None reads each script as JSON (LD+JSON); "@nextjs_rsc:<key>"
    searches RSC payloads for <key>; anything else is a variable pattern
    such as "var jobs".
    """

    scripts: list[str] = Field(default_factory=list)
    pattern: str | None = None


class ScriptJsonResponse(BaseModel):
    values: list[Any] | None = None
