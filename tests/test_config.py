"""Tests for loading connection settings from YAML and the environment."""

import pytest

from mcp_obsidian.config import load_obsidian_config
from mcp_obsidian.constants import DEFAULT_PORT, DEFAULT_TIMEOUT


@pytest.fixture
def missing_file(tmp_path):
    return tmp_path / "absent.yaml"


class TestEnvironment:
    def test_defaults_with_only_api_key(self, missing_file):
        config = load_obsidian_config(missing_file, {"OBSIDIAN_API_KEY": "abc"})

        assert config.api_key == "abc"
        assert config.host == "127.0.0.1"
        assert config.port == DEFAULT_PORT
        assert config.protocol == "https"
        assert config.verify_ssl is False
        assert config.timeout == DEFAULT_TIMEOUT
        assert config.base_url == "https://127.0.0.1:27124"

    def test_environment_values(self, missing_file):
        config = load_obsidian_config(
            missing_file,
            {
                "OBSIDIAN_API_KEY": " abc ",
                "OBSIDIAN_HOST": "obsidian.local",
                "OBSIDIAN_PORT": "27123",
                "OBSIDIAN_PROTOCOL": "HTTP",
                "OBSIDIAN_VERIFY_SSL": "yes",
                "OBSIDIAN_TIMEOUT": "5",
            },
        )

        assert config.api_key == "abc"
        assert config.base_url == "http://obsidian.local:27123"
        assert config.verify_ssl is True
        assert config.timeout == 5.0

    @pytest.mark.parametrize("flag, protocol", [("false", "http"), ("true", "https")])
    def test_use_https_shorthand(self, missing_file, flag, protocol):
        config = load_obsidian_config(
            missing_file, {"OBSIDIAN_API_KEY": "abc", "OBSIDIAN_USE_HTTPS": flag}
        )
        assert config.protocol == protocol

    def test_explicit_protocol_beats_shorthand(self, missing_file):
        config = load_obsidian_config(
            missing_file,
            {
                "OBSIDIAN_API_KEY": "abc",
                "OBSIDIAN_PROTOCOL": "https",
                "OBSIDIAN_USE_HTTPS": "false",
            },
        )
        assert config.protocol == "https"

    def test_payload_hides_api_key(self, missing_file):
        config = load_obsidian_config(missing_file, {"OBSIDIAN_API_KEY": "abc"})
        assert "api_key" not in config.as_payload()
        assert "abc" not in str(config.as_payload())


class TestConfigFile:
    def test_obsidian_section(self, tmp_path):
        path = tmp_path / "obsidian.yaml"
        path.write_text(
            "obsidian:\n  api_key: from-file\n  port: 8080\n  vault_path: ~/Vault\n",
            encoding="utf-8",
        )

        config = load_obsidian_config(path, {})

        assert config.api_key == "from-file"
        assert config.port == 8080
        assert config.vault_path is not None
        assert not config.vault_path.startswith("~")

    def test_top_level_settings(self, tmp_path):
        path = tmp_path / "obsidian.yaml"
        path.write_text("api_key: top\nverify_ssl: true\n", encoding="utf-8")

        config = load_obsidian_config(path, {})

        assert config.api_key == "top"
        assert config.verify_ssl is True

    def test_environment_overrides_file(self, tmp_path):
        path = tmp_path / "obsidian.yaml"
        path.write_text("api_key: file\nhost: file-host\n", encoding="utf-8")

        config = load_obsidian_config(path, {"OBSIDIAN_HOST": "env-host", "OBSIDIAN_PORT": " "})

        assert config.api_key == "file"
        assert config.host == "env-host"
        assert config.port == DEFAULT_PORT

    def test_config_path_from_environment(self, tmp_path):
        path = tmp_path / "custom.yaml"
        path.write_text("api_key: custom\n", encoding="utf-8")

        config = load_obsidian_config(environ={"MCP_OBSIDIAN_CONFIG": str(path)})

        assert config.api_key == "custom"

    def test_non_mapping_file_rejected(self, tmp_path):
        path = tmp_path / "obsidian.yaml"
        path.write_text("- just\n- a list\n", encoding="utf-8")

        with pytest.raises(ValueError, match="must contain a mapping"):
            load_obsidian_config(path, {"OBSIDIAN_API_KEY": "abc"})


class TestValidation:
    def test_missing_api_key(self, missing_file):
        with pytest.raises(ValueError, match="OBSIDIAN_API_KEY is required"):
            load_obsidian_config(missing_file, {})

    def test_bad_protocol(self, missing_file):
        with pytest.raises(ValueError, match="protocol"):
            load_obsidian_config(
                missing_file, {"OBSIDIAN_API_KEY": "abc", "OBSIDIAN_PROTOCOL": "ftp"}
            )

    @pytest.mark.parametrize("port", ["0", "70000", "abc"])
    def test_bad_port(self, missing_file, port):
        with pytest.raises(ValueError, match="port"):
            load_obsidian_config(missing_file, {"OBSIDIAN_API_KEY": "abc", "OBSIDIAN_PORT": port})

    @pytest.mark.parametrize("timeout", ["0", "-1", "soon"])
    def test_bad_timeout(self, missing_file, timeout):
        with pytest.raises(ValueError, match="timeout"):
            load_obsidian_config(
                missing_file, {"OBSIDIAN_API_KEY": "abc", "OBSIDIAN_TIMEOUT": timeout}
            )

    def test_bad_boolean(self, missing_file):
        with pytest.raises(ValueError, match="verify_ssl"):
            load_obsidian_config(
                missing_file, {"OBSIDIAN_API_KEY": "abc", "OBSIDIAN_VERIFY_SSL": "maybe"}
            )
