"""Tests for localroute.config — LocalizationConfig frozen dataclass."""

import pytest

from localroute.config import LocalizationConfig


class TestLocalizationConfig:
    def test_defaults(self) -> None:
        cfg = LocalizationConfig()

        assert cfg.default_culture == "en"
        assert dict(cfg.supported_cultures) == {}
        assert cfg.default_controller == "home"
        assert cfg.default_action == "index"

    def test_override(self) -> None:
        cfg = LocalizationConfig(
            default_culture="fi",
            supported_cultures={"fi": "Suomi", "en": "English"},
            default_controller="Start",
        )

        assert cfg.default_culture == "fi"
        assert cfg.cultures == ("fi", "en")
        assert cfg.default_controller == "Start"

    def test_frozen(self) -> None:
        cfg = LocalizationConfig()

        with pytest.raises(AttributeError):
            cfg.default_culture = "fi"  # type: ignore[misc]

    def test_default_culture_case_insensitive(self) -> None:
        cfg = LocalizationConfig(default_culture="en")
        assert cfg.is_default_culture("EN")
        assert not cfg.is_default_culture("fi")

    def test_default_route(self) -> None:
        cfg = LocalizationConfig(default_controller="Home", default_action="Index")

        assert cfg.is_default_route("home", "index")
        assert cfg.is_default_route("HOME", "INDEX")
        assert not cfg.is_default_route("home", "about")
        assert not cfg.is_default_route("account", "index")
        assert cfg.is_default_action("index")
        assert cfg.is_default_controller("home")

    def test_canonical_culture(self) -> None:
        cfg = LocalizationConfig(supported_cultures={"en": "English", "fi-FI": "Suomi"})

        assert cfg.canonical_culture("FI-fi") == "fi-FI"
        assert cfg.canonical_culture("en") == "en"
        assert cfg.canonical_culture("De") == "De"
