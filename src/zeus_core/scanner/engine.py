"""Scan engine — runs framework matchers across a source tree."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable
from pathlib import Path

from zeus_core.scanner.collector import collect_source_files
from zeus_core.scanner.frameworks import Matcher, default_matchers
from zeus_core.scanner.models import Endpoint, ScanResult, utc_timestamp

logger = logging.getLogger(__name__)


class ScanEngine:
    """Orchestrates route extraction across a directory.

    Files are processed one at a time and matchers run in registry order, so
    endpoint and warning order is reproducible for an unchanged tree.
    """

    def __init__(self, matchers: list[Matcher] | None = None) -> None:
        self._matchers = list(matchers) if matchers is not None else default_matchers()

    @property
    def matchers(self) -> list[Matcher]:
        return list(self._matchers)

    def scan(
        self,
        root_dir: str | Path,
        files: Iterable[str | Path] | None = None,
    ) -> ScanResult:
        """Scan ``root_dir`` (or only ``files``) and return the aggregate.

        Reading a source file is not recoverable: an ``OSError`` aborts the
        scan. A matcher raising while extracting is recorded as a warning.
        """
        root = Path(root_dir).resolve()
        if files is None:
            paths = collect_source_files(root)
        else:
            paths = (Path(f).resolve() for f in files)

        endpoints: list[Endpoint] = []
        warnings: list[str] = []
        files_scanned = 0

        for file_path in paths:
            content = file_path.read_text(encoding="utf-8", errors="replace")
            files_scanned += 1
            found, failed = self._analyze_file(str(file_path), content)
            endpoints.extend(found)
            warnings.extend(failed)

        logger.debug(
            "Scanned %d files under %s: %d endpoints, %d warnings",
            files_scanned,
            root,
            len(endpoints),
            len(warnings),
        )
        return ScanResult(
            root_dir=str(root),
            endpoints=tuple(endpoints),
            warnings=tuple(warnings),
            scanned_at=utc_timestamp(),
        )

    def _analyze_file(
        self, file_path: str, content: str
    ) -> tuple[list[Endpoint], list[str]]:
        """Run every applicable matcher against one file."""
        endpoints: list[Endpoint] = []
        warnings: list[str] = []

        applicable = [m for m in self._matchers if m.applies(file_path, content)]
        for matcher in applicable:
            try:
                endpoints.extend(matcher.extract(file_path, content))
            except Exception as e:
                logger.warning("%s matcher failed on %s: %s", matcher.name, file_path, e)
                logger.debug("Extraction traceback", exc_info=True)
                warnings.append(f"Failed to parse {file_path} with {matcher.name}")

        return endpoints, warnings


def scan(
    root_dir: str | Path,
    matchers: list[Matcher] | None = None,
    files: Iterable[str | Path] | None = None,
) -> ScanResult:
    """Scan a backend source tree. Never writes to disk."""
    return ScanEngine(matchers).scan(root_dir, files=files)


def generate_output_json(
    root_dir: str | Path,
    matchers: list[Matcher] | None = None,
) -> str:
    """Scan and return the result in its persisted JSON form."""
    return json.dumps(scan(root_dir, matchers).to_dict(), indent=2)
