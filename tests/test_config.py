"""Tests for TOML config file loading."""

from __future__ import annotations

import argparse
from pathlib import Path

import pytest

from utrim.cli import build_parser, load_config, resolve_options
from utrim.errors import ConfigError
from utrim.lines import Mode


class TestLoadConfig:
    def test_missing_config_returns_empty(self, tmp_path: Path) -> None:
        assert load_config(None, tmp_path) == {}

    def test_explicit_path(self, tmp_path: Path) -> None:
        cfg = tmp_path / "custom.toml"
        cfg.write_text('[trim]\nmode = "left"\n')
        result = load_config(cfg, tmp_path)
        assert result["trim"] == {"mode": "left"}

    def test_auto_discover_utrim_toml(self, tmp_path: Path) -> None:
        cfg = tmp_path / "utrim.toml"
        cfg.write_text("[trim]\nlines = false\n")
        result = load_config(None, tmp_path)
        assert result["trim"] == {"lines": False}


class TestConfigMerge:
    def test_defaults(self, tmp_path: Path) -> None:
        ns = build_parser().parse_args([])
        opts = resolve_options(ns, tmp_path)
        assert opts.mode is Mode.BOTH
        assert opts.per_line is True
        assert opts.inputs == ["-"]

    def test_config_mode(self, tmp_path: Path) -> None:
        (tmp_path / "utrim.toml").write_text('[trim]\nmode = "right"\n')
        ns = build_parser().parse_args(["a.txt"])
        opts = resolve_options(ns, tmp_path)
        assert opts.mode is Mode.RIGHT

    def test_cli_overrides_config_mode(self, tmp_path: Path) -> None:
        (tmp_path / "utrim.toml").write_text('[trim]\nmode = "right"\n')
        ns = build_parser().parse_args(["a.txt", "--mode", "left"])
        opts = resolve_options(ns, tmp_path)
        assert opts.mode is Mode.LEFT

    def test_config_lines(self, tmp_path: Path) -> None:
        (tmp_path / "utrim.toml").write_text("[trim]\nlines = false\n")
        ns = build_parser().parse_args(["a.txt"])
        opts = resolve_options(ns, tmp_path)
        assert opts.per_line is False

    def test_cli_overrides_config_lines(self, tmp_path: Path) -> None:
        (tmp_path / "utrim.toml").write_text("[trim]\nlines = false\n")
        ns = build_parser().parse_args(["a.txt", "--lines"])
        opts = resolve_options(ns, tmp_path)
        assert opts.per_line is True

    def test_explicit_config_flag(self, tmp_path: Path) -> None:
        cfg = tmp_path / "alt.toml"
        cfg.write_text('[trim]\nmode = "left"\n')
        ns = build_parser().parse_args(["a.txt", "--config", str(cfg)])
        opts = resolve_options(ns, tmp_path / "elsewhere")
        assert opts.mode is Mode.LEFT


class TestInvalidConfig:
    def test_unknown_mode(self, tmp_path: Path) -> None:
        (tmp_path / "utrim.toml").write_text('[trim]\nmode = "middle"\n')
        ns = build_parser().parse_args([])
        with pytest.raises(ConfigError, match="invalid mode"):
            resolve_options(ns, tmp_path)

    def test_mode_not_string(self, tmp_path: Path) -> None:
        (tmp_path / "utrim.toml").write_text("[trim]\nmode = 3\n")
        ns = build_parser().parse_args([])
        with pytest.raises(ConfigError, match="must be a string"):
            resolve_options(ns, tmp_path)

    def test_lines_not_bool(self, tmp_path: Path) -> None:
        (tmp_path / "utrim.toml").write_text('[trim]\nlines = "yes"\n')
        ns = build_parser().parse_args([])
        with pytest.raises(ConfigError, match="must be a boolean"):
            resolve_options(ns, tmp_path)

    def test_trim_not_table(self, tmp_path: Path) -> None:
        (tmp_path / "utrim.toml").write_text('trim = "both"\n')
        ns = build_parser().parse_args([])
        with pytest.raises(ConfigError, match="must be a table"):
            resolve_options(ns, tmp_path)

    def test_bad_cli_mode(self, tmp_path: Path) -> None:
        ns = build_parser().parse_args(["--mode", "up"])
        with pytest.raises(argparse.ArgumentTypeError):
            resolve_options(ns, tmp_path)
