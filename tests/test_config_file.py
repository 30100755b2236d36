"""Tests for configuration loading."""

import textwrap
from pathlib import Path

import pytest

from ipv4calc.config import CalcConfig, DisplayConfig, load_config


def _write(path: Path, text: str) -> Path:
    path.write_text(textwrap.dedent(text))
    return path


class TestLoadConfig:
    def test_defaults_without_file(self, isolated_cwd):
        config = load_config()
        assert config == CalcConfig()
        assert config.display == DisplayConfig(binary=False, color="auto", format="table")

    def test_picks_up_file_in_cwd(self, isolated_cwd):
        _write(isolated_cwd / "ipv4calc.toml", """\
            [display]
            binary = true
            format = "json"
        """)
        config = load_config()
        assert config.display.binary is True
        assert config.display.format == "json"
        assert config.display.color == "auto"

    def test_explicit_path(self, tmp_path):
        path = _write(tmp_path / "custom.toml", """\
            [display]
            color = "never"
        """)
        config = load_config(path)
        assert config.display.color == "never"

    def test_explicit_path_as_string(self, tmp_path):
        path = _write(tmp_path / "custom.toml", "[display]\n")
        assert load_config(str(path)) == CalcConfig()

    def test_missing_explicit_path(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "missing.toml")

    def test_empty_file(self, tmp_path):
        path = _write(tmp_path / "empty.toml", "")
        assert load_config(path) == CalcConfig()

    def test_invalid_color(self, tmp_path):
        path = _write(tmp_path / "bad.toml", """\
            [display]
            color = "sometimes"
        """)
        with pytest.raises(ValueError, match="display.color"):
            load_config(path)

    @pytest.mark.parametrize("value", ['"false"', "0", "1"])
    def test_binary_must_be_boolean(self, tmp_path, value):
        path = _write(tmp_path / "bad.toml", f"[display]\nbinary = {value}\n")
        with pytest.raises(ValueError, match="display.binary"):
            load_config(path)

    def test_invalid_format(self, tmp_path):
        path = _write(tmp_path / "bad.toml", """\
            [display]
            format = "xml"
        """)
        with pytest.raises(ValueError, match="display.format"):
            load_config(path)

    def test_malformed_toml(self, tmp_path):
        path = _write(tmp_path / "bad.toml", "[display\n")
        with pytest.raises(ValueError):
            load_config(path)
