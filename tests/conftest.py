"""Shared fixtures: the account/login example site in two cultures."""

import pytest

from localroute.config import LocalizationConfig
from localroute.routing.registry import LocalizedRouteRegistry


@pytest.fixture
def config() -> LocalizationConfig:
    return LocalizationConfig(
        default_culture="en",
        supported_cultures={"en": "English", "fi": "Suomi", "sv": "Svenska"},
    )


@pytest.fixture
def registry() -> LocalizedRouteRegistry:
    """A fresh registry per test, populated like a small bilingual site."""
    reg = LocalizedRouteRegistry()

    reg.add_controller_route("Home", "en", "home")
    reg.add_controller_route("Home", "fi", "koti")
    reg.add_action_route("Home", "Index", "en", "", "Home")
    reg.add_action_route("Home", "Index", "fi", "", "Etusivu")
    reg.add_action_route("Home", "About", "en", "about", "About us")
    reg.add_action_route("Home", "About", "fi", "meista", "Meistä")

    reg.add_controller_route("account", "en", "account")
    reg.add_controller_route("account", "fi", "tili")
    reg.add_action_route("account", "index", "en", "", "Account")
    reg.add_action_route("account", "login", "en", "login", "Login")
    reg.add_action_route("account", "login", "fi", "kirjaudu", "Kirjaudu")
    # English only: other cultures fall back to this route text
    reg.add_action_route("account", "logout", "en", "logout", "Log out")

    reg.add_controller_route("blog", "en", "blog")
    reg.add_action_route("blog", "post", "en", "post", "Post", ["id", "slug"])
    reg.add_action_route("blog", "post", "fi", "kirjoitus", "Kirjoitus")
    return reg
