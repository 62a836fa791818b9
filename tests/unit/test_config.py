"""Unit tests for configuration."""

from pathlib import Path

import idna

from uri_host.config import Config, get_config, reset_config
from uri_host.normalization import label_to_ascii


class TestConfig:
    """Test suite for Config and the global accessor."""

    def test_defaults(self):
        """Test default settings."""
        config = Config()

        assert config.idna.transitional is False
        assert config.public_suffix.source_path is None
        assert config.public_suffix.only_icann is True
        assert config.log_level == "INFO"

    def test_global_instance(self):
        """Test get_config caches until reset."""
        config = get_config()
        assert get_config() is config

        reset_config()
        assert get_config() is not config

    def test_environment_overrides(self, monkeypatch, tmp_path):
        """Test sub-configs read their prefixed environment variables."""
        monkeypatch.setenv("URI_HOST_IDNA_TRANSITIONAL", "true")
        monkeypatch.setenv("URI_HOST_PSL_SOURCE_PATH", str(tmp_path / "list.dat"))
        monkeypatch.setenv("URI_HOST_PSL_ONLY_ICANN", "false")

        config = Config()

        assert config.idna.transitional is True
        assert config.public_suffix.source_path == Path(tmp_path / "list.dat")
        assert config.public_suffix.only_icann is False

    def test_transitional_processing(self, monkeypatch):
        """Test the IDNA mode follows the configuration."""
        calls = []
        original = idna.uts46_remap

        def recording_remap(label, std3_rules=True, transitional=False):
            calls.append(transitional)
            return original(label, std3_rules=std3_rules, transitional=transitional)

        monkeypatch.setattr(idna, "uts46_remap", recording_remap)

        assert label_to_ascii("faß") == "xn--fa-hia"
        monkeypatch.setenv("URI_HOST_IDNA_TRANSITIONAL", "true")
        reset_config()
        label_to_ascii("faß")

        assert calls == [False, True]

    def test_explicit_mode_wins(self, monkeypatch):
        """Test an explicit mode overrides the configuration."""
        calls = []
        original = idna.uts46_remap

        def recording_remap(label, std3_rules=True, transitional=False):
            calls.append(transitional)
            return original(label, std3_rules=std3_rules, transitional=transitional)

        monkeypatch.setattr(idna, "uts46_remap", recording_remap)
        label_to_ascii("bücher", transitional=True)

        assert calls == [True]
