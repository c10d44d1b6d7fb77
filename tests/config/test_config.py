"""Tests for configuration loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from tagsync.config.config import Config
from tagsync.config.paths import default_config_path, resolve_overridable_path
from tagsync.shared.errors import ConfigError


def test_missing_file_gives_defaults(tmp_path: Path) -> None:
    config = Config.load(tmp_path / "absent.toml")

    assert config.log_file is None
    assert config.encoder == "ffmpeg"


def test_load_reads_toml(tmp_path: Path) -> None:
    config_file = tmp_path / "config.toml"
    _ = config_file.write_text('log_file = "logs/tagsync.log"\nencoder = "/usr/local/bin/ffmpeg"\n', encoding="utf-8")

    config = Config.load(config_file)

    assert config.log_file == Path("logs/tagsync.log")
    assert config.encoder == "/usr/local/bin/ffmpeg"


def test_load_is_memoized(tmp_path: Path) -> None:
    config_file = tmp_path / "config.toml"
    _ = config_file.write_text('encoder = "avconv"\n', encoding="utf-8")

    first = Config.load(config_file)
    _ = config_file.write_text('encoder = "changed"\n', encoding="utf-8")

    assert Config.load(config_file) is first
    Config.reset()
    assert Config.load(config_file).encoder == "changed"


def test_empty_log_file_means_unset(tmp_path: Path) -> None:
    config_file = tmp_path / "config.toml"
    _ = config_file.write_text('log_file = ""\n', encoding="utf-8")

    assert Config.load(config_file).log_file is None


@pytest.mark.parametrize(
    "content",
    ["encoder = [\n", 'encoder = ""\n', "encoder = 3\n", "log_file = 5\n"],
)
def test_invalid_configuration(tmp_path: Path, content: str) -> None:
    config_file = tmp_path / "config.toml"
    _ = config_file.write_text(content, encoding="utf-8")

    with pytest.raises(ConfigError):
        _ = Config.load(config_file)


def test_default_config_path_honours_environment(tmp_path: Path) -> None:
    target = tmp_path / "custom.toml"

    assert default_config_path({"TAGSYNC_CONFIG": str(target)}) == target.resolve()


def test_resolve_overridable_path_prefers_explicit(tmp_path: Path) -> None:
    resolved = resolve_overridable_path(
        explicit_path=tmp_path / "explicit.toml",
        env={"X": str(tmp_path / "env.toml")},
        env_var="X",
        default_factory=lambda: tmp_path / "default.toml",
    )

    assert resolved == (tmp_path / "explicit.toml").resolve()


def test_resolve_overridable_path_falls_back_to_default(tmp_path: Path) -> None:
    resolved = resolve_overridable_path(
        explicit_path=None,
        env={"X": "   "},
        env_var="X",
        default_factory=lambda: tmp_path / "default.toml",
    )

    assert resolved == (tmp_path / "default.toml").resolve()
