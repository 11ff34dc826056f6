"""Tests for config: SiteConfig frozen dataclass."""

from pathlib import Path

import pytest

from config import SiteConfig
from errors import ConfigurationError


class TestSiteConfig:
    def test_defaults(self) -> None:
        cfg = SiteConfig()

        assert cfg.site_name == "Harmiana"
        assert cfg.host == "127.0.0.1"
        assert cfg.port == 5000
        assert cfg.debug is False
        assert cfg.build_dir == "build"
        assert cfg.reveal_threshold == 0.15
        assert cfg.log_level == "info"

    def test_override(self) -> None:
        cfg = SiteConfig(port=8080, debug=True, build_dir=Path("dist"))
        assert cfg.port == 8080
        assert cfg.debug is True
        assert cfg.build_dir == Path("dist")

    def test_frozen(self) -> None:
        cfg = SiteConfig()
        with pytest.raises(AttributeError):
            cfg.debug = True  # type: ignore[misc]

    @pytest.mark.parametrize("threshold", [-0.01, 1.01])
    def test_invalid_threshold(self, threshold) -> None:
        with pytest.raises(ConfigurationError, match="reveal_threshold"):
            SiteConfig(reveal_threshold=threshold)

    def test_invalid_log_level(self) -> None:
        with pytest.raises(ConfigurationError, match="log level"):
            SiteConfig(log_level="loud")


class TestFromEnv:
    def test_empty_environment(self) -> None:
        assert SiteConfig.from_env({}) == SiteConfig()

    def test_reads_prefixed_values(self) -> None:
        cfg = SiteConfig.from_env({
            "HARMIANA_PORT": "8080",
            "HARMIANA_DEBUG": "true",
            "HARMIANA_REVEAL_THRESHOLD": "0.4",
            "HARMIANA_CONTACT_EMAIL": "hi@example.com",
            "HARMIANA_BUILD_DIR": "public",
            "OTHER_PORT": "1",
        })

        assert cfg.port == 8080
        assert cfg.debug is True
        assert cfg.reveal_threshold == 0.4
        assert cfg.contact_email == "hi@example.com"
        assert cfg.build_dir == "public"

    def test_false_flag(self) -> None:
        assert SiteConfig.from_env({"HARMIANA_DEBUG": "0"}).debug is False

    def test_bad_number(self) -> None:
        with pytest.raises(ConfigurationError, match="port"):
            SiteConfig.from_env({"HARMIANA_PORT": "eighty"})
