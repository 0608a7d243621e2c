# apps/api/main.py
import json

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel

from zyaml.config import Settings
from zyaml.errors import ZyamlError
from zyaml.jsonbridge import from_json_value, to_json_value
from zyaml.parser import parse
from zyaml.serializer import serialize
from zyaml.structgen import generate_go_struct

app = FastAPI(title="Zuxi YAML API", version="0.1.0")
# CORS für das Toolkit-Dashboard
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

SETTINGS = Settings.load()


class TextPayload(BaseModel):
    text: str


def _check_size(payload: TextPayload) -> str:
    if len(payload.text.encode("utf-8")) > SETTINGS.max_input_size:
        raise HTTPException(413, "input too large")
    return payload.text


def _yaml_to_json(text: str):
    try:
        with parse(text) as document:
            return to_json_value(document.value)
    except (ZyamlError, RecursionError) as exc:
        raise HTTPException(422, "invalid input") from exc


@app.get("/healthz", response_class=PlainTextResponse)
def healthz() -> str:
    return "ok"


@app.post("/convert/yaml2json")
def convert_yaml_to_json(payload: TextPayload) -> dict:
    return {"json": _yaml_to_json(_check_size(payload))}


@app.post("/convert/json2yaml")
def convert_json_to_yaml(payload: TextPayload) -> dict[str, str]:
    text = _check_size(payload)
    try:
        value = from_json_value(json.loads(text))
    except (ValueError, ZyamlError, RecursionError) as exc:
        raise HTTPException(422, "invalid input") from exc
    return {"yaml": serialize(value)}


@app.post("/format/yaml")
def format_yaml(payload: TextPayload) -> dict[str, str]:
    text = _check_size(payload)
    try:
        with parse(text) as document:
            formatted = serialize(document.value)
    except (ZyamlError, RecursionError) as exc:
        raise HTTPException(422, "invalid input") from exc
    return {"yaml": formatted}


@app.post("/struct/yaml")
def struct_from_yaml(payload: TextPayload) -> dict[str, str]:
    data = _yaml_to_json(_check_size(payload))
    return {"go": generate_go_struct(data)}
