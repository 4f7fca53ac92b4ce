"""Lexical patterns for route declarations and documentation blocks."""

from __future__ import annotations

import re
from dataclasses import dataclass

_QUOTE = r"[`\"']"
_UNQUOTED = r"[^`\"']"


@dataclass(frozen=True)
class RoutePattern:
    """A route declaration regex and where to find method and path in it."""

    name: str
    regex: re.Pattern[str]
    method_group: int = 1
    path_group: int = 2
    default_path: str = ""


# app.get("/users", handler), router.delete('/users/:id', ...)
FLUENT_CALL = RoutePattern(
    name="fluent_call",
    regex=re.compile(
        rf"\b(get|post|put|delete)\s*\(\s*{_QUOTE}({_UNQUOTED}+){_QUOTE}",
        re.IGNORECASE,
    ),
)

# fastify.route({ method: 'GET', url: '/users', handler })
OBJECT_LITERAL = RoutePattern(
    name="object_literal",
    regex=re.compile(
        r"\broute\s*\(\s*\{[\s\S]*?"
        rf"method\s*:\s*{_QUOTE}(GET|POST|PUT|DELETE){_QUOTE}[\s\S]*?"
        rf"url\s*:\s*{_QUOTE}({_UNQUOTED}+){_QUOTE}"
        r"[\s\S]*?\}\s*\)",
        re.IGNORECASE,
    ),
)

# @Get(), @Post(':id'), @Delete("/items")
DECORATOR = RoutePattern(
    name="decorator",
    regex=re.compile(
        rf"@(Get|Post|Put|Delete)\s*\(\s*(?:{_QUOTE}({_UNQUOTED}*){_QUOTE})?\s*\)"
    ),
    default_path="/",
)

EXPRESS_MARKER = re.compile(r"\bexpress\b|\bRouter\b")
FASTIFY_MARKER = re.compile(r"\bfastify\b")
CONTROLLER_MARKER = re.compile(r"@Controller\b")

# Documentation blocks and their annotations
DOC_BLOCK = re.compile(r"/\*\*[\s\S]*?\*/")
LINE_DECORATION = re.compile(r"^\s*\*\s?")
PARAM_TAG = re.compile(r"@param\s+\{([^}]+)\}\s+([\w$.]*)")
REQUEST_BODY_TAG = re.compile(r"@requestBody\s+([\s\S]*?)(?=@|\*/|\Z)")
RESPONSE_EXAMPLE_TAG = re.compile(
    r"@responseExample\s+(\d{3})\s+([\s\S]*?)(?=@|\*/|\Z)"
)
