"""NestJS-style matcher — ``@Get()`` / ``@Post(':id')`` handler decorators."""

from __future__ import annotations

from pathlib import Path

from zeus_core.scanner.frameworks.base import Matcher
from zeus_core.scanner.patterns import CONTROLLER_MARKER, DECORATOR


class NestMatcher(Matcher):
    name = "nestjs"
    pattern = DECORATOR

    def applies(self, file_path: str, content: str) -> bool:
        # Only TypeScript controllers; the controller prefix is not applied
        return Path(file_path).suffix == ".ts" and bool(
            CONTROLLER_MARKER.search(content)
        )
