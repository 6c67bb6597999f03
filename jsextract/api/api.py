"""
HTTP surface over the extraction functions.

Stateless: every request is handled independently. Extractor options come from
JSEXTRACT_* environment variables.
"""

import logging

from fastapi import FastAPI, HTTPException

from jsextract.config import ExtractorConfig
from jsextract.decode import compact_json, decode_literal, repair_control_chars
from jsextract.errors import ExtractionError, MalformedEscape, VariableNotFound
from jsextract.extract import (
    extract_json_parse_argument,
    extract_script_json,
    extract_variable,
    find_rsc_matches,
)
from models import (
    DecodedValue,
    DecodeRequest,
    JsonParseRequest,
    RepairRequest,
    RscMatch,
    RscRequest,
    ScriptJsonRequest,
    ScriptJsonResponse,
    TextResponse,
    VariableRequest,
)

logger = logging.getLogger(__name__)

app = FastAPI(title="Script JSON Extraction API")


@app.post("/decode", response_model=TextResponse)
def decode(request: DecodeRequest) -> TextResponse:
    try:
        return TextResponse(text=decode_literal(request.body))
    except MalformedEscape as exc:
        logger.warning("decode rejected: %s", exc)
        raise HTTPException(status_code=422, detail=str(exc)) from exc


@app.post("/variables", response_model=DecodedValue)
def variable(request: VariableRequest) -> DecodedValue:
    try:
        return extract_variable(request.script, request.pattern)
    except VariableNotFound as exc:
        logger.warning("variables rejected: %s", exc)
        raise HTTPException(status_code=404, detail=str(exc)) from exc


@app.post("/json-parse", response_model=DecodedValue)
def json_parse(request: JsonParseRequest) -> DecodedValue:
    try:
        return extract_json_parse_argument(request.text)
    except ExtractionError as exc:
        logger.warning("json-parse rejected: %s", exc)
        raise HTTPException(status_code=422, detail=str(exc)) from exc


@app.post("/rsc", response_model=list[RscMatch])
def rsc(request: RscRequest) -> list[RscMatch]:
    return find_rsc_matches(request.script, request.json_key)


@app.post("/repair", response_model=TextResponse)
def repair(request: RepairRequest) -> TextResponse:
    if request.compact:
        return TextResponse(text=compact_json(request.text))
    return TextResponse(text=repair_control_chars(request.text))


@app.post("/extract", response_model=ScriptJsonResponse)
def extract(request: ScriptJsonRequest) -> ScriptJsonResponse:
    values = extract_script_json(
        request.scripts, request.pattern, config=ExtractorConfig.from_env()
    )
    return ScriptJsonResponse(values=values)
