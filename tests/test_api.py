import pytest
from fastapi import HTTPException

from apps.api import main
from apps.api.main import TextPayload


def test_healthz():
    assert main.healthz() == "ok"


def test_convert_yaml_to_json():
    result = main.convert_yaml_to_json(TextPayload(text="name: zuxi\nports: [80, 443]"))
    assert result == {"json": {"name": "zuxi", "ports": [80, 443]}}


def test_convert_json_to_yaml():
    result = main.convert_json_to_yaml(TextPayload(text='{"a": {"b": true}}'))
    assert result == {"yaml": "a:\n  b: true\n"}


def test_format_yaml():
    result = main.format_yaml(TextPayload(text="- x: 1\n    # note\n  y: 2"))
    assert result == {"yaml": "- x: 1\n  y: 2\n"}


def test_struct_from_yaml():
    result = main.struct_from_yaml(TextPayload(text="port: 8080"))
    assert result["go"] == 'type Root struct {\n\tPort int64 `json:"port"`\n}\n'


@pytest.mark.parametrize(
    "handler, text",
    [
        (main.convert_yaml_to_json, "a: [1"),
        (main.convert_json_to_yaml, "{oops"),
        (main.format_yaml, "a: {b: 1, c}"),
        (main.struct_from_yaml, "a: {"),
    ],
)
def test_invalid_input_is_422(handler, text):
    with pytest.raises(HTTPException) as excinfo:
        handler(TextPayload(text=text))
    assert excinfo.value.status_code == 422
    assert excinfo.value.detail == "invalid input"


def test_oversized_input_is_413(monkeypatch):
    monkeypatch.setattr(main.SETTINGS, "max_input_size", 4)
    with pytest.raises(HTTPException) as excinfo:
        main.format_yaml(TextPayload(text="key: value"))
    assert excinfo.value.status_code == 413
