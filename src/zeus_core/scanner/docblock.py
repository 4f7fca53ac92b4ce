"""Documentation block lookup and annotation parsing.

A documentation block is a ``/** ... */`` comment. The block attached to a
route declaration is the last one that ends before the declaration starts.
This is a lexical approximation: an unrelated block sitting between the real
doc block and the declaration wins.

Supported annotations::

    @param {TYPE} NAME            parameter, TYPE containing "=" means optional
    @requestBody BODY             JSON body schema, raw text kept on parse failure
    @responseExample STATUS BODY  first one only, BODY as JSON or raw text
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any

from zeus_core.scanner.models import Parameter, ParameterType, ResponseExample
from zeus_core.scanner.patterns import (
    DOC_BLOCK,
    LINE_DECORATION,
    PARAM_TAG,
    REQUEST_BODY_TAG,
    RESPONSE_EXAMPLE_TAG,
)

logger = logging.getLogger(__name__)

# Keyword → type, checked in order; first substring hit wins
_TYPE_KEYWORDS: list[tuple[tuple[str, ...], ParameterType]] = [
    (("string",), ParameterType.STRING),
    (("number", "int", "float"), ParameterType.NUMBER),
    (("boolean", "bool"), ParameterType.BOOLEAN),
    (("array",), ParameterType.ARRAY),
    (("object",), ParameterType.OBJECT),
]

_DEFAULT_MARKER = "="


@dataclass(frozen=True)
class DocInfo:
    """Parsed content of one documentation block."""

    description: str | None = None
    parameters: tuple[Parameter, ...] = ()
    request_body_schema: Any = None
    response: ResponseExample | None = None


def find_doc_block(content: str, offset: int) -> str | None:
    """Return the last documentation block found before ``offset``."""
    blocks = DOC_BLOCK.findall(content[:offset])
    return blocks[-1] if blocks else None


def detect_parameter_type(raw: str) -> ParameterType:
    value = raw.lower()
    for keywords, param_type in _TYPE_KEYWORDS:
        if any(k in value for k in keywords):
            return param_type
    return ParameterType.UNKNOWN


def parse_doc_block(block: str | None) -> DocInfo:
    """Extract description, parameters, body schema and response example."""
    if not block:
        return DocInfo()

    return DocInfo(
        description=_parse_description(block),
        parameters=tuple(_parse_parameters(block)),
        request_body_schema=_parse_request_body(block),
        response=_parse_response(block),
    )


def _strip_delimiters(block: str) -> str:
    text = block.strip()
    if text.startswith("/**"):
        text = text[3:]
    if text.endswith("*/"):
        text = text[:-2]
    return text


def _undecorate(text: str) -> str:
    """Drop the leading ``*`` decoration from every line."""
    lines = (LINE_DECORATION.sub("", line).rstrip() for line in text.split("\n"))
    return "\n".join(lines).strip()


def _parse_description(block: str) -> str | None:
    lines = [
        LINE_DECORATION.sub("", line).strip()
        for line in _strip_delimiters(block).split("\n")
    ]
    kept = [line for line in lines if line and not line.startswith("@")]
    return " ".join(kept).strip() or None


def _parse_parameters(block: str) -> list[Parameter]:
    params: list[Parameter] = []
    for match in PARAM_TAG.finditer(block):
        type_raw, name = match.group(1), match.group(2)
        if not name:
            continue
        params.append(
            Parameter(
                name=name,
                type=detect_parameter_type(type_raw),
                required=_DEFAULT_MARKER not in type_raw,
            )
        )
    return params


def _parse_request_body(block: str) -> Any:
    match = REQUEST_BODY_TAG.search(block)
    if not match:
        return None
    raw = _undecorate(match.group(1))
    try:
        return json.loads(raw)
    except ValueError:
        logger.debug("Request body is not JSON, keeping raw text")
        return {"schema": raw}


def _parse_response(block: str) -> ResponseExample | None:
    match = RESPONSE_EXAMPLE_TAG.search(block)
    if not match:
        return None
    raw = _undecorate(match.group(2))
    try:
        example: Any = json.loads(raw)
    except ValueError:
        example = raw
    return ResponseExample(status=int(match.group(1)), example=example)
