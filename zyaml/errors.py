from __future__ import annotations


class ZyamlError(Exception):
    """Base class for errors raised by the YAML engine and its commands."""

    kind = "error"

    def __init__(self, message: str, kind: str | None = None):
        if kind is not None:
            self.kind = kind
        self.message = message
        super().__init__(message)


class FlowSyntaxError(ZyamlError):
    """Unterminated bracket/brace or a malformed flow entry."""

    kind = "flow_syntax"

    def __init__(self, message: str, text: str):
        self.text = text
        super().__init__(f"{message}: {text!r}")


class ConversionError(ZyamlError):
    kind = "conversion"


class DocumentReleasedError(ZyamlError):
    kind = "released"


class InputError(ZyamlError):
    """Raised by the command layer; kind is "missing" or "invalid"."""

    def __init__(self, kind: str, message: str | None = None):
        if message is None:
            message = "no input provided" if kind == "missing" else "invalid input"
        super().__init__(message, kind)
