"""Base matcher — shared extraction logic for framework-specific matchers."""

from __future__ import annotations

import re

from zeus_core.scanner.docblock import find_doc_block, parse_doc_block
from zeus_core.scanner.models import Endpoint, HttpMethod
from zeus_core.scanner.patterns import RoutePattern


class Matcher:
    """Recognizes one route declaration style.

    Subclasses set ``name`` and ``pattern`` and implement :meth:`applies`.
    The default :meth:`extract` walks every match of ``pattern``.
    """

    name: str = ""
    pattern: RoutePattern

    def applies(self, file_path: str, content: str) -> bool:
        raise NotImplementedError

    def extract(self, file_path: str, content: str) -> list[Endpoint]:
        endpoints: list[Endpoint] = []
        for match in self.pattern.regex.finditer(content):
            endpoint = self._build(file_path, content, match)
            if endpoint is not None:
                endpoints.append(endpoint)
        return endpoints

    def _build(
        self,
        file_path: str,
        content: str,
        match: re.Match[str],
    ) -> Endpoint | None:
        """Turn one declaration match into an Endpoint, or None to reject it."""
        method = HttpMethod.parse(match.group(self.pattern.method_group) or "")
        if method is None:
            return None

        path = match.group(self.pattern.path_group) or self.pattern.default_path
        if not path:
            return None

        doc = parse_doc_block(find_doc_block(content, match.start()))
        return Endpoint(
            method=method,
            path=path,
            framework=self.name,
            source_file=file_path,
            description=doc.description,
            parameters=doc.parameters,
            request_body_schema=doc.request_body_schema,
            response=doc.response,
            line=content.count("\n", 0, match.start()) + 1,
        )

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name!r}>"
