"""Project configuration — defaults, persisted config file, env vars, overrides."""

from __future__ import annotations

import dataclasses
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from zeus_core.snapshot import DEFAULT_OUTPUT, OUTPUT_DIR

logger = logging.getLogger(__name__)

CONFIG_FILE = f"{OUTPUT_DIR}/config.yaml"

_TRUE_VALUES = {"1", "true", "yes", "on"}


def _default_root() -> str:
    return str(Path.cwd())


@dataclass(frozen=True)
class ZeusConfig:
    """Resolved per-invocation configuration."""

    root_dir: str = field(default_factory=_default_root)
    output_file: str = DEFAULT_OUTPUT
    incremental: bool = True
    serve_host: str = "127.0.0.1"
    serve_port: int = 4173

    @property
    def output_path(self) -> Path:
        return Path(self.root_dir) / self.output_file

    @property
    def config_path(self) -> Path:
        return Path(self.root_dir) / CONFIG_FILE

    @classmethod
    def load(cls, root_dir: str | Path | None = None, **overrides: Any) -> ZeusConfig:
        """Resolve layers: defaults < config file < env vars < overrides.

        ``None`` overrides are ignored so CLI options that were not given
        fall through to the lower layers.
        """
        root = Path(root_dir).resolve() if root_dir else Path.cwd()
        values: dict[str, Any] = {}
        values.update(_read_config_file(root / CONFIG_FILE))

        env_port = os.environ.get("ZEUS_CORE_SERVE_PORT")
        if env_port:
            values["serve_port"] = int(env_port)

        env_incremental = os.environ.get("ZEUS_CORE_INCREMENTAL")
        if env_incremental:
            values["incremental"] = _as_bool(env_incremental)

        values.update({k: v for k, v in overrides.items() if v is not None})
        # An explicit root always beats the one recorded in the file
        if root_dir:
            values["root_dir"] = str(root)

        known = {f.name for f in dataclasses.fields(cls)}
        return cls(**{k: v for k, v in values.items() if k in known})

    def save(self) -> Path:
        """Persist this configuration under its root."""
        path = self.config_path
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(
            yaml.safe_dump(dataclasses.asdict(self), sort_keys=False),
            encoding="utf-8",
        )
        return path


def _read_config_file(path: Path) -> dict[str, Any]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except (OSError, yaml.YAMLError) as e:
        logger.debug("Skipping config %s: %s", path, e)
        return {}
    if not isinstance(data, dict):
        logger.debug("Config %s is not a mapping, ignoring", path)
        return {}

    if "incremental" in data:
        data["incremental"] = _as_bool(data["incremental"])
    if "serve_port" in data:
        try:
            data["serve_port"] = int(data["serve_port"])
        except (TypeError, ValueError):
            logger.debug("Ignoring invalid serve_port %r in %s", data["serve_port"], path)
            del data["serve_port"]
    return data


def _as_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in _TRUE_VALUES
    return bool(value)
