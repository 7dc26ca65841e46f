"""
Unit Tests for Configuration Module.

This test suite validates the configuration loading functionality.
"""
import os
import tempfile

from config import load_config, get_default_config, read_secret_file


def test_get_default_config():
    """Test default configuration values."""
    config = get_default_config()

    assert config["notion"]["token_file"] == "/run/secrets/notion_token"
    assert config["notion"]["database_id"] is None
    assert config["blog"]["posts_path"] == "./data/posts"


def test_load_config_from_project_root():
    """Test loading config.yml from project root."""
    config = load_config()

    assert "notion" in config
    assert "token_file" in config["notion"]


def test_load_config_with_explicit_path():
    """Test loading config from explicit path."""
    with tempfile.NamedTemporaryFile(mode="w", suffix=".yml", delete=False) as f:
        f.write("""
notion:
  token_file: /custom/path/token
  database_id: 0f3a5b2c9d
""")
        temp_path = f.name

    try:
        config = load_config(temp_path)
        assert config["notion"]["token_file"] == "/custom/path/token"
        assert config["notion"]["database_id"] == "0f3a5b2c9d"
    finally:
        os.unlink(temp_path)


def test_load_config_file_not_found():
    """Test loading config when file doesn't exist."""
    config = load_config("/nonexistent/path/config.yml")

    assert config == get_default_config()


def test_load_config_invalid_yaml(tmp_path):
    """Unparsable YAML falls back to defaults."""
    config_path = tmp_path / "config.yml"
    config_path.write_text("notion: [unclosed\n")

    assert load_config(str(config_path)) == get_default_config()


def test_load_config_non_mapping_root(tmp_path):
    """A list at the YAML root falls back to defaults."""
    config_path = tmp_path / "config.yml"
    config_path.write_text("- just\n- a list\n")

    assert load_config(str(config_path)) == get_default_config()


def test_read_secret_file_success():
    """Test reading a Docker secret file."""
    with tempfile.NamedTemporaryFile(mode="w", delete=False) as f:
        f.write("secret_notion_token\n")
        temp_path = f.name

    try:
        secret = read_secret_file(temp_path)
        assert secret == "secret_notion_token"  # Should be stripped
    finally:
        os.unlink(temp_path)


def test_read_secret_file_not_found():
    """Test reading a secret file that doesn't exist."""
    secret = read_secret_file("/nonexistent/secret/file")
    assert secret is None
