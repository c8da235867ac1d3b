from pathlib import Path

import pytest

from swagger_composer.config import (
    DEFAULT_OUTPUT,
    ComposerConfig,
    load_config,
    read_project_version,
    resolve_version,
)
from swagger_composer.errors import ConfigError

FIXTURES = Path(__file__).parent / "fixtures"


class TestComposerConfig:
    def test_defaults(self):
        config = ComposerConfig()
        assert config.title == "API"
        assert config.site_title == "API Documentation"
        assert config.logo_alt_text == "API logo"
        assert config.output == DEFAULT_OUTPUT
        assert config.format == "json"

    def test_explicit_site_title_kept(self):
        config = ComposerConfig(title="Browser API", site_title="Docs")
        assert config.site_title == "Docs"


class TestLoadConfig:
    def test_load_from_yaml(self):
        config = load_config(FIXTURES / "swagger.yaml")
        assert config.title == "Browser API"
        assert config.site_title == "Browser API Documentation"
        assert config.http_routes[0] == FIXTURES / "routes" / "http" / "ping.py"
        assert config.ws_routes == [FIXTURES / "routes" / "ws" / "session.py"]
        assert config.readme == FIXTURES / "README.md"

    def test_overrides_win(self, tmp_path):
        config = load_config(
            FIXTURES / "swagger.yaml",
            title="Other",
            http_routes=(Path("a.py"),),
            ws_routes=(),
            output=None,
        )
        assert config.title == "Other"
        assert config.http_routes == [Path("a.py")]
        assert len(config.ws_routes) == 1

    def test_without_file(self):
        config = load_config(None, http_routes=(Path("a.py"),))
        assert config.http_routes == [Path("a.py")]

    def test_not_a_mapping(self, tmp_path):
        f = tmp_path / "swagger.yaml"
        f.write_text("- a\n- b\n")
        with pytest.raises(ConfigError):
            load_config(f)

    def test_invalid_yaml(self, tmp_path):
        f = tmp_path / "swagger.yaml"
        f.write_text("title: [unclosed\n")
        with pytest.raises(ConfigError):
            load_config(f)

    def test_invalid_value(self, tmp_path):
        f = tmp_path / "swagger.yaml"
        f.write_text("format: xml\n")
        with pytest.raises(ConfigError):
            load_config(f)


class TestVersion:
    def test_read_pep621_version(self):
        assert read_project_version(FIXTURES / "pyproject.toml") == "1.2.0"

    def test_read_poetry_version(self, tmp_path):
        f = tmp_path / "pyproject.toml"
        f.write_text('[tool.poetry]\nname = "x"\nversion = "3.1.4"\n')
        assert read_project_version(f) == "3.1.4"

    def test_missing_pyproject(self, tmp_path):
        assert read_project_version(tmp_path / "pyproject.toml") is None

    def test_broken_pyproject(self, tmp_path):
        f = tmp_path / "pyproject.toml"
        f.write_text("[project\n")
        with pytest.raises(ConfigError):
            read_project_version(f)

    def test_explicit_version_wins(self):
        config = ComposerConfig(version="9.9.9", pyproject=FIXTURES / "pyproject.toml")
        assert resolve_version(config) == "9.9.9"

    def test_falls_back_to_pyproject_then_default(self, tmp_path):
        assert resolve_version(ComposerConfig(pyproject=FIXTURES / "pyproject.toml")) == "1.2.0"
        assert resolve_version(ComposerConfig(pyproject=tmp_path / "missing.toml")) == "0.0.0"
        assert resolve_version(ComposerConfig()) == "0.0.0"
