"""Unit tests for configuration loading and environment substitution."""

import os
from pathlib import Path
from unittest.mock import patch

import pytest

from src.catalog.runtime.config.config_data import ConfigData
from src.catalog.runtime.config.config_template import (
    load_templated_yaml,
    substitute_env_vars,
)
from src.catalog.runtime.settings import EnvironmentVariables


class TestSubstituteEnvVars:
    def test_required_variable(self):
        with patch.dict(os.environ, {"CATALOG_PORT": "9000"}):
            assert substitute_env_vars("port: ${CATALOG_PORT}") == "port: 9000"

    def test_missing_required_variable_raises(self):
        with patch.dict(os.environ, {}, clear=True):
            with pytest.raises(ValueError, match="CATALOG_PORT not set"):
                substitute_env_vars("port: ${CATALOG_PORT}")

    def test_default_value(self):
        with patch.dict(os.environ, {}, clear=True):
            assert substitute_env_vars("level: ${LOG_LEVEL:-DEBUG}") == "level: DEBUG"

    def test_custom_error_message(self):
        with patch.dict(os.environ, {}, clear=True):
            with pytest.raises(ValueError, match="seed file is mandatory"):
                substitute_env_vars("${SEED:?seed file is mandatory}")


class TestEnvironmentVariables:
    def test_defaults(self):
        with patch.dict(os.environ, {}, clear=True):
            env_vars = EnvironmentVariables(_env_file=None)

            assert env_vars.environment == "development"
            assert env_vars.config_file == "config.yaml"

    def test_loaded_from_environment(self):
        test_env = {"APP_ENVIRONMENT": "production", "CONFIG_FILE": "/etc/catalog.yaml"}
        with patch.dict(os.environ, test_env, clear=True):
            env_vars = EnvironmentVariables(_env_file=None)

            assert env_vars.environment == "production"
            assert env_vars.config_file == "/etc/catalog.yaml"


class TestLoadTemplatedYaml:
    def test_missing_file_gives_defaults(self, tmp_path: Path):
        config = load_templated_yaml(tmp_path / "absent.yaml")

        assert config == ConfigData()

    def test_loads_and_substitutes(self, tmp_path: Path):
        config_file = tmp_path / "config.yaml"
        config_file.write_text(
            "config:\n"
            "  app:\n"
            "    port: ${CATALOG_TEST_PORT:-8000}\n"
            "  logging:\n"
            "    level: WARNING\n"
            "  catalog:\n"
            "    seed_file: ${CATALOG_TEST_SEED}\n",
            encoding="utf-8",
        )

        test_env = {"CATALOG_TEST_PORT": "9100", "CATALOG_TEST_SEED": "seed.json"}
        with patch.dict(os.environ, test_env):
            config = load_templated_yaml(config_file)

        assert config.app.port == 9100
        assert config.logging.level == "WARNING"
        assert config.catalog.seed_file == str(tmp_path.resolve() / "seed.json")

    def test_absolute_seed_file_kept(self, tmp_path: Path):
        seed = tmp_path.resolve() / "elsewhere" / "products.json"
        config_file = tmp_path / "config.yaml"
        config_file.write_text(
            f"config:\n  catalog:\n    seed_file: {seed}\n", encoding="utf-8"
        )

        config = load_templated_yaml(config_file)

        assert config.catalog.seed_file == str(seed)

    def test_seed_file_independent_of_working_directory(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ):
        config_dir = tmp_path / "conf"
        config_dir.mkdir()
        config_file = config_dir / "config.yaml"
        config_file.write_text(
            "config:\n  catalog:\n    seed_file: data/products.json\n",
            encoding="utf-8",
        )
        monkeypatch.chdir(tmp_path)

        config = load_templated_yaml(config_file)

        assert config.catalog.seed_file == str(
            config_dir.resolve() / "data" / "products.json"
        )

    def test_environment_prefixed_override(self, tmp_path: Path):
        config_file = tmp_path / "config.yaml"
        config_file.write_text(
            "config:\n  logging:\n    level: ${CATALOG_TEST_LEVEL:-INFO}\n",
            encoding="utf-8",
        )

        test_env = {"APP_ENVIRONMENT": "test", "TEST_CATALOG_TEST_LEVEL": "DEBUG"}
        with patch.dict(os.environ, test_env):
            config = load_templated_yaml(config_file)

        assert config.logging.level == "DEBUG"

    def test_invalid_yaml_raises(self, tmp_path: Path):
        config_file = tmp_path / "config.yaml"
        config_file.write_text("config: [unclosed\n", encoding="utf-8")

        with pytest.raises(ValueError, match="Error parsing YAML"):
            load_templated_yaml(config_file)

    def test_invalid_values_raise(self, tmp_path: Path):
        config_file = tmp_path / "config.yaml"
        config_file.write_text(
            "config:\n  logging:\n    format: xml\n", encoding="utf-8"
        )

        with pytest.raises(ValueError, match="Invalid configuration"):
            load_templated_yaml(config_file)
