"""
Tests for search path configuration.
"""

import pytest
from pathlib import Path

from srclibkit.core.config import SrclibConfig, load_config, load_yaml_config
from srclibkit.core.exceptions import ConfigurationError
from srclibkit.toolchain.search_path import SearchPath


class TestLoadConfigPrecedence:
    """Test where the search path comes from."""

    def test_explicit_value_wins(self, tmp_path):
        config_file = tmp_path / "srclib.yaml"
        config_file.write_text("srclibpath: /from/file\n")

        config = load_config(
            search_path="/explicit",
            config_file=config_file,
            environ={"SRCLIBPATH": "/from/env"},
        )

        assert config == SrclibConfig(SearchPath(["/explicit"]), "explicit")

    def test_env_over_config_file(self, tmp_path):
        config_file = tmp_path / "srclib.yaml"
        config_file.write_text("srclibpath: /from/file\n")

        config = load_config(config_file=config_file, environ={"SRCLIBPATH": "/a:/b"})

        assert list(config.search_path) == ["/a", "/b"]
        assert config.source == "env"

    def test_config_file(self, tmp_path):
        config_file = tmp_path / "srclib.yaml"
        config_file.write_text("srclibpath: /x::/y\n")

        config = load_config(config_file=config_file, environ={})

        assert list(config.search_path) == ["/x", ".", "/y"]
        assert config.source == "config-file"

    def test_config_file_list_value(self, tmp_path):
        config_file = tmp_path / "srclib.yaml"
        config_file.write_text("srclibpath:\n  - /x\n  - /y\n")

        config = load_config(config_file=config_file, environ={})

        assert list(config.search_path) == ["/x", "/y"]

    def test_default_is_home_srclib(self, tmp_path, monkeypatch):
        monkeypatch.setattr(Path, "home", classmethod(lambda cls: tmp_path))

        config = load_config(environ={})

        assert list(config.search_path) == [str(tmp_path / ".srclib")]
        assert config.source == "default"

    def test_empty_env_falls_through(self, tmp_path, monkeypatch):
        monkeypatch.setattr(Path, "home", classmethod(lambda cls: tmp_path))

        config = load_config(environ={"SRCLIBPATH": ""})

        assert config.source == "default"

    def test_reads_process_environment(self, monkeypatch):
        monkeypatch.setenv("SRCLIBPATH", "/env/path")

        assert list(load_config().search_path) == ["/env/path"]

    def test_missing_config_file_falls_through(self, tmp_path, monkeypatch):
        monkeypatch.setattr(Path, "home", classmethod(lambda cls: tmp_path))

        config = load_config(config_file=tmp_path / "missing.yaml", environ={})

        assert config.source == "default"


class TestLoadConfigErrors:
    """Test configuration failures are raised, not fatal."""

    def test_no_home_directory(self, monkeypatch):
        def no_home(cls):
            raise RuntimeError("Could not determine home directory.")

        monkeypatch.setattr(Path, "home", classmethod(no_home))

        with pytest.raises(ConfigurationError) as exc_info:
            load_config(environ={})

        assert "home directory" in str(exc_info.value)

    def test_no_home_not_needed_with_env(self, monkeypatch):
        def no_home(cls):
            raise RuntimeError("Could not determine home directory.")

        monkeypatch.setattr(Path, "home", classmethod(no_home))

        assert load_config(environ={"SRCLIBPATH": "/a"}).source == "env"

    def test_invalid_yaml(self, tmp_path):
        config_file = tmp_path / "srclib.yaml"
        config_file.write_text("srclibpath: [unclosed\n")

        with pytest.raises(ConfigurationError):
            load_config(config_file=config_file, environ={})


class TestLoadYamlConfig:
    """Test load_yaml_config."""

    def test_missing_file(self, tmp_path):
        assert load_yaml_config(tmp_path / "missing.yaml") == {}

    def test_empty_file(self, tmp_path):
        config_file = tmp_path / "srclib.yaml"
        config_file.write_text("")

        assert load_yaml_config(config_file) == {}

    def test_non_mapping(self, tmp_path):
        config_file = tmp_path / "srclib.yaml"
        config_file.write_text("- a\n- b\n")

        with pytest.raises(ConfigurationError):
            load_yaml_config(config_file)
