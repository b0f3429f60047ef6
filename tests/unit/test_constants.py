"""
Unit tests for environment-driven constants.
"""

from ircline.constants import _get_env_float, _get_env_int, _get_env_str


class TestEnvHelpers:
    """Test the environment lookup helpers."""

    def test_int_from_env(self, monkeypatch):
        """Test a valid integer override."""
        monkeypatch.setenv("IRC_TEST_INT", "42")

        assert _get_env_int("IRC_TEST_INT", 1) == 42

    def test_int_invalid_falls_back(self, monkeypatch, caplog):
        """Test an invalid integer logs a warning and uses the default."""
        monkeypatch.setenv("IRC_TEST_INT", "many")

        assert _get_env_int("IRC_TEST_INT", 7) == 7
        assert "Invalid integer value for IRC_TEST_INT" in caplog.text

    def test_int_unset(self, monkeypatch):
        """Test the default when unset."""
        monkeypatch.delenv("IRC_TEST_INT", raising=False)

        assert _get_env_int("IRC_TEST_INT", 3) == 3

    def test_float_from_env(self, monkeypatch):
        """Test a valid float override."""
        monkeypatch.setenv("IRC_TEST_FLOAT", "2.5")

        assert _get_env_float("IRC_TEST_FLOAT", 1.0) == 2.5

    def test_float_invalid_falls_back(self, monkeypatch):
        """Test an invalid float uses the default."""
        monkeypatch.setenv("IRC_TEST_FLOAT", "fast")

        assert _get_env_float("IRC_TEST_FLOAT", 1.5) == 1.5

    def test_str_empty_falls_back(self, monkeypatch):
        """Test an empty string uses the default."""
        monkeypatch.setenv("IRC_TEST_STR", "")

        assert _get_env_str("IRC_TEST_STR", "utf-8") == "utf-8"

    def test_str_from_env(self, monkeypatch):
        """Test a string override."""
        monkeypatch.setenv("IRC_TEST_STR", "latin-1")

        assert _get_env_str("IRC_TEST_STR", "utf-8") == "latin-1"
