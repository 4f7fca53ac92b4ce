"""Tests for layered configuration."""

from __future__ import annotations

import dataclasses
from pathlib import Path

import pytest
import yaml

from zeus_core.config import ZeusConfig


def _write_config(root: Path, text: str) -> None:
    (root / ".zeus-core").mkdir(exist_ok=True)
    (root / ".zeus-core" / "config.yaml").write_text(text)


def test_defaults(tmp_path: Path):
    config = ZeusConfig.load(tmp_path)
    assert config.root_dir == str(tmp_path.resolve())
    assert config.output_file == ".zeus-core/output.json"
    assert config.incremental is True
    assert config.serve_host == "127.0.0.1"
    assert config.serve_port == 4173
    assert config.output_path == tmp_path.resolve() / ".zeus-core" / "output.json"


def test_config_file_overrides_defaults(tmp_path: Path):
    _write_config(tmp_path, "incremental: false\nserve_port: 9000\nunknown_key: 1\n")
    config = ZeusConfig.load(tmp_path)
    assert config.incremental is False
    assert config.serve_port == 9000


def test_env_overrides_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    _write_config(tmp_path, "serve_port: 9000\nincremental: false\n")
    monkeypatch.setenv("ZEUS_CORE_SERVE_PORT", "9100")
    monkeypatch.setenv("ZEUS_CORE_INCREMENTAL", "yes")
    config = ZeusConfig.load(tmp_path)
    assert config.serve_port == 9100
    assert config.incremental is True


def test_explicit_overrides_win(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("ZEUS_CORE_SERVE_PORT", "9100")
    config = ZeusConfig.load(tmp_path, serve_port=9200, incremental=None)
    assert config.serve_port == 9200
    assert config.incremental is True


def test_explicit_root_beats_recorded_root(tmp_path: Path):
    _write_config(tmp_path, "root_dir: /somewhere/else\n")
    assert ZeusConfig.load(tmp_path).root_dir == str(tmp_path.resolve())


def test_invalid_config_ignored(tmp_path: Path):
    _write_config(tmp_path, "serve_port: [unclosed\n")
    assert ZeusConfig.load(tmp_path).serve_port == 4173

    _write_config(tmp_path, "- just\n- a list\n")
    assert ZeusConfig.load(tmp_path).serve_port == 4173


def test_config_file_values_coerced(tmp_path: Path):
    _write_config(tmp_path, 'incremental: "no"\nserve_port: "9300"\n')
    config = ZeusConfig.load(tmp_path)
    assert config.incremental is False
    assert config.serve_port == 9300


def test_invalid_port_in_config_ignored(tmp_path: Path):
    _write_config(tmp_path, 'serve_port: "abc"\n')
    assert ZeusConfig.load(tmp_path).serve_port == 4173


def test_save_round_trip(tmp_path: Path):
    config = ZeusConfig.load(tmp_path, serve_port=5000)
    path = config.save()

    assert path == tmp_path.resolve() / ".zeus-core" / "config.yaml"
    assert yaml.safe_load(path.read_text())["serve_port"] == 5000
    assert ZeusConfig.load(tmp_path) == config


def test_config_immutable(tmp_path: Path):
    config = ZeusConfig.load(tmp_path)
    with pytest.raises(dataclasses.FrozenInstanceError):
        config.serve_port = 1  # type: ignore[misc]
