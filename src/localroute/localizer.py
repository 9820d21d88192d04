"""Localizer — one config plus one registry behind a small API.

Link-generation and request code usually only needs this object::

    localizer = Localizer(config, registry)
    localizer.url_for("account", "login", "fi")          # "/fi/tili/kirjaudu"
    localizer.url_for("blog", "post", "en", id=5)        # "/blog/post/5"
    localizer.detect_culture("/fi/tili/kirjaudu")        # "fi"
"""

from collections.abc import Mapping
from typing import Any

from localroute.config import LocalizationConfig
from localroute.routing.culture import detect_culture
from localroute.routing.entries import LocalizedUrl
from localroute.routing.params import ordered_parameter_suffix
from localroute.routing.registry import LocalizedRouteRegistry
from localroute.routing.resolver import resolve_url


class Localizer:
    """Resolve localized URLs against an explicit registry and config."""

    __slots__ = ("config", "registry")

    def __init__(
        self,
        config: LocalizationConfig,
        registry: LocalizedRouteRegistry | None = None,
    ) -> None:
        self.config = config
        self.registry = registry if registry is not None else LocalizedRouteRegistry()

    def resolve(self, controller: str, action: str, culture: str | None = None) -> LocalizedUrl:
        """Resolve a route. *culture* defaults to the default culture."""
        return resolve_url(
            self.registry,
            self.config,
            controller,
            action,
            culture or self.config.default_culture,
        )

    def ordered_parameters(
        self, controller: str, action: str, route_values: Mapping[str, Any]
    ) -> str:
        return ordered_parameter_suffix(self.registry, controller, action, route_values)

    def detect_culture(self, path: str) -> str:
        return detect_culture(self.config, path)

    def url_for(
        self,
        controller: str,
        action: str,
        culture: str | None = None,
        /,
        **route_values: Any,
    ) -> str:
        """Resolved URL with the ordered parameter suffix appended.

        The route arguments are positional-only so that any declared
        parameter name, ``culture`` included, can be passed as a route value.
        """
        url = self.resolve(controller, action, culture).url
        suffix = self.ordered_parameters(controller, action, route_values)
        if not suffix:
            return url
        return url.rstrip("/") + suffix

    def link_name(
        self,
        controller: str,
        action: str,
        culture: str | None = None,
        default: str = "",
    ) -> str:
        """Localized link text, or *default* where none overrides it."""
        return self.resolve(controller, action, culture).link_name or default
