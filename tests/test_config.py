"""Tests for config.py module."""

import pytest

from secret_sync.config import load_settings
from secret_sync.exceptions import ConfigParsingError


class TestLoadSettings:
    """Tests for settings resolution."""

    def test_defaults(self, tmp_path):
        """Test defaults without a settings file."""
        settings = load_settings(tmp_path)

        assert settings.root == tmp_path.resolve()
        assert settings.declarations == tmp_path.resolve() / ".dev.vars"
        assert settings.public_prefixes == ("NEXT_PUBLIC_",)
        assert settings.wrangler is None
        assert settings.env is None

    def test_settings_file_in_root(self, tmp_path):
        """Test secret-sync.yaml in the root is picked up."""
        (tmp_path / "secret-sync.yaml").write_text(
            "declarations: config/.dev.vars\n"
            "public_prefixes: [NEXT_PUBLIC_, VITE_]\n"
            "wrangler: node_modules/.bin/wrangler\n"
            "env: production\n"
        )

        settings = load_settings(tmp_path)

        assert settings.declarations == tmp_path.resolve() / "config" / ".dev.vars"
        assert settings.public_prefixes == ("NEXT_PUBLIC_", "VITE_")
        assert settings.wrangler == "node_modules/.bin/wrangler"
        assert settings.env == "production"

    def test_command_line_env_wins(self, tmp_path):
        """Test --env overrides the settings file."""
        (tmp_path / "secret-sync.yaml").write_text("env: production\n")

        assert load_settings(tmp_path, env="staging").env == "staging"

    def test_explicit_settings_file(self, tmp_path):
        """Test a settings file given on the command line."""
        config_file = tmp_path / "custom.yaml"
        config_file.write_text("env: preview\n")

        assert load_settings(tmp_path, config_file=config_file).env == "preview"

    def test_explicit_settings_file_missing(self, tmp_path):
        """Test a missing explicit settings file is an error."""
        with pytest.raises(ConfigParsingError, match="does not exist"):
            load_settings(tmp_path, config_file=tmp_path / "nope.yaml")

    def test_empty_settings_file(self, tmp_path):
        """Test an empty settings file keeps the defaults."""
        (tmp_path / "secret-sync.yaml").write_text("")

        assert load_settings(tmp_path).env is None

    def test_malformed_yaml(self, tmp_path):
        """Test malformed YAML raises ConfigParsingError."""
        (tmp_path / "secret-sync.yaml").write_text("env: [unclosed\n")

        with pytest.raises(ConfigParsingError, match="malformed YAML"):
            load_settings(tmp_path)

    def test_not_a_mapping(self, tmp_path):
        """Test a YAML list is rejected."""
        (tmp_path / "secret-sync.yaml").write_text("- env\n")

        with pytest.raises(ConfigParsingError, match="mapping"):
            load_settings(tmp_path)

    def test_unknown_key(self, tmp_path):
        """Test typos in keys are reported."""
        (tmp_path / "secret-sync.yaml").write_text("enviroment: staging\n")

        with pytest.raises(ConfigParsingError, match="enviroment"):
            load_settings(tmp_path)

    def test_bad_prefixes(self, tmp_path):
        """Test public_prefixes must be a list of strings."""
        (tmp_path / "secret-sync.yaml").write_text("public_prefixes: NEXT_PUBLIC_\n")

        with pytest.raises(ConfigParsingError, match="public_prefixes"):
            load_settings(tmp_path)

    def test_bad_scalar_type(self, tmp_path):
        """Test string settings reject other types."""
        (tmp_path / "secret-sync.yaml").write_text("env: 3\n")

        with pytest.raises(ConfigParsingError, match="'env' must be a string"):
            load_settings(tmp_path)

    def test_undecodable_settings_file(self, tmp_path):
        """Test a settings file that is not UTF-8 raises ConfigParsingError."""
        (tmp_path / "secret-sync.yaml").write_bytes(b"env: \xff\xfe\n")

        with pytest.raises(ConfigParsingError, match="cannot be read"):
            load_settings(tmp_path)
