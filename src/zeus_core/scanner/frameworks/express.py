"""Express-style matcher — fluent ``app.get('/path', ...)`` calls."""

from __future__ import annotations

from zeus_core.scanner.frameworks.base import Matcher
from zeus_core.scanner.patterns import EXPRESS_MARKER, FLUENT_CALL


class ExpressMatcher(Matcher):
    name = "express"
    pattern = FLUENT_CALL

    def applies(self, file_path: str, content: str) -> bool:
        return bool(EXPRESS_MARKER.search(content)) and bool(
            self.pattern.regex.search(content)
        )
