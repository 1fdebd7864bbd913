"""Tests for config/properties.py."""

import pytest
from pydantic import ValidationError
from secretlayer.config.properties import SecretsManagerProperties


class TestSecretsManagerProperties:
    """Tests for SecretsManagerProperties."""

    def test_default_values(self):
        """Has sensible defaults."""
        properties = SecretsManagerProperties()
        assert properties.enabled is True
        assert properties.secret_names == ()
        assert properties.name is None
        assert properties.prefix == "secret"
        assert properties.default_context == "application"
        assert properties.profile_separator == "_"
        assert properties.fail_fast is True
        assert properties.region == "us-east-1"

    def test_from_environment(self, monkeypatch):
        """Reads SECRETLAYER_ prefixed environment variables."""
        monkeypatch.setenv("SECRETLAYER_NAME", "orders")
        monkeypatch.setenv("SECRETLAYER_FAIL_FAST", "false")
        monkeypatch.setenv("SECRETLAYER_SECRET_NAMES", '["a", "b"]')
        monkeypatch.setenv("SECRETLAYER_PROFILE_SEPARATOR", "-")

        properties = SecretsManagerProperties()

        assert properties.name == "orders"
        assert properties.fail_fast is False
        assert properties.secret_names == ("a", "b")
        assert properties.profile_separator == "-"

    def test_from_dotenv_file(self, tmp_path):
        """Reads a .env file in the working directory."""
        (tmp_path / ".env").write_text("SECRETLAYER_PREFIX=/config\n")

        properties = SecretsManagerProperties()

        assert properties.prefix == "/config"

    def test_frozen(self):
        """Properties cannot be changed after construction."""
        properties = SecretsManagerProperties()
        with pytest.raises(ValidationError):
            properties.prefix = "other"

    @pytest.mark.parametrize("prefix", ["secret", "/secret", "/secret/app", "my.secrets-1"])
    def test_valid_prefix(self, prefix):
        """Accepts simple and slash-led prefixes."""
        assert SecretsManagerProperties(prefix=prefix).prefix == prefix

    @pytest.mark.parametrize("prefix", ["", "secret/", "sec ret", "/secret/a_b"])
    def test_invalid_prefix(self, prefix):
        """Rejects empty or malformed prefixes."""
        with pytest.raises(ValidationError):
            SecretsManagerProperties(prefix=prefix)

    def test_empty_default_context(self):
        """Default context must not be empty."""
        with pytest.raises(ValidationError):
            SecretsManagerProperties(default_context="")

    @pytest.mark.parametrize("separator", ["_", "-", ".", "/", "\\", "__"])
    def test_valid_profile_separator(self, separator):
        assert SecretsManagerProperties(profile_separator=separator).profile_separator == separator

    @pytest.mark.parametrize("separator", ["", " ", "!", "a b"])
    def test_invalid_profile_separator(self, separator):
        """Rejects empty or unsupported separators."""
        with pytest.raises(ValidationError):
            SecretsManagerProperties(profile_separator=separator)


    def test_secret_names_cannot_be_mutated(self):
        """Explicit secret names are an immutable tuple."""
        properties = SecretsManagerProperties(secret_names=["a"])

        assert properties.secret_names == ("a",)
        with pytest.raises(AttributeError):
            properties.secret_names.append("injected")  # type: ignore[attr-defined]
