"""Fastify-style matcher — ``route({ method, url, ... })`` registrations."""

from __future__ import annotations

from zeus_core.scanner.frameworks.base import Matcher
from zeus_core.scanner.patterns import FASTIFY_MARKER, OBJECT_LITERAL


class FastifyMatcher(Matcher):
    """Object-literal route options.

    ``method`` must come before ``url`` inside the options object; any other
    fields may sit between or around them.
    """

    name = "fastify"
    pattern = OBJECT_LITERAL

    def applies(self, file_path: str, content: str) -> bool:
        return bool(FASTIFY_MARKER.search(content)) and bool(
            self.pattern.regex.search(content)
        )
