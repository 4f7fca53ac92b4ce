"""Snapshot persistence and incremental reconciliation.

The snapshot file is the only state shared between invocations. It is read
once and overwritten in full once per ``persist`` call, without locking:
concurrent runs against the same root are unsupported and the last writer
wins.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any

from zeus_core.scanner.models import Endpoint, PersistResult, ScanResult

logger = logging.getLogger(__name__)

OUTPUT_DIR = ".zeus-core"
OUTPUT_FILE = "output.json"
DEFAULT_OUTPUT = f"{OUTPUT_DIR}/{OUTPUT_FILE}"


def endpoint_key(endpoint: Endpoint | dict[str, Any]) -> str:
    """Reconciliation key ``"METHOD path"``. Not guaranteed unique."""
    if isinstance(endpoint, Endpoint):
        return endpoint.key
    return f"{endpoint.get('method')} {endpoint.get('path')}"


def _canonical(endpoint: Endpoint | dict[str, Any]) -> str:
    """Comparison form; ``line`` is positional and left out."""
    data = endpoint.to_dict() if isinstance(endpoint, Endpoint) else dict(endpoint)
    data.pop("line", None)
    return json.dumps(data, sort_keys=True)


def output_path_for(root_dir: str | Path, output_file: str = DEFAULT_OUTPUT) -> Path:
    return Path(root_dir) / output_file


def read_snapshot(path: str | Path) -> dict[str, Any] | None:
    """Load a persisted snapshot, or None if missing or unreadable."""
    try:
        data = json.loads(Path(path).read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        logger.debug("No usable snapshot at %s: %s", path, e)
        return None
    if not isinstance(data, dict) or not isinstance(data.get("endpoints"), list):
        logger.debug("Snapshot at %s has unexpected shape, ignoring", path)
        return None
    return data


def count_unchanged(
    endpoints: tuple[Endpoint, ...] | list[Endpoint],
    previous: dict[str, Any] | None,
) -> int:
    """Count new endpoints whose serialized form matches the previous snapshot.

    Previous endpoints are indexed by key; when two share a key the later one
    replaces the earlier in the lookup.
    """
    if not previous:
        return 0

    lookup: dict[str, str] = {}
    for prior in previous.get("endpoints", []):
        if isinstance(prior, dict):
            lookup[endpoint_key(prior)] = _canonical(prior)

    return sum(
        1 for endpoint in endpoints if lookup.get(endpoint.key) == _canonical(endpoint)
    )


def persist(
    result: ScanResult,
    root_dir: str | Path,
    incremental: bool = False,
    output_file: str = DEFAULT_OUTPUT,
) -> PersistResult:
    """Write ``result`` as the snapshot under ``root_dir``.

    Incremental mode only affects the unchanged counter; every new endpoint
    is always written. Directory creation and write errors propagate.
    """
    output_path = output_path_for(root_dir, output_file)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    unchanged = 0
    if incremental:
        unchanged = count_unchanged(result.endpoints, read_snapshot(output_path))

    _write_atomic(output_path, json.dumps(result.to_dict(), indent=2))
    logger.debug("Wrote %d endpoints to %s", len(result.endpoints), output_path)

    return PersistResult(
        output_path=str(output_path),
        wrote_file=True,
        endpoints_written=len(result.endpoints),
        endpoints_unchanged=unchanged,
    )


def _write_atomic(path: Path, text: str) -> None:
    """Replace ``path`` with ``text`` so readers never see a partial file."""
    fd, tmp = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(text)
        os.replace(tmp, path)
    except BaseException:
        Path(tmp).unlink(missing_ok=True)
        raise
