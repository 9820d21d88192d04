"""Resolve (controller, action, culture) into a concrete URL path.

Default-culture URLs carry no culture prefix::

    home/index   -> "/"
    home/about   -> "/home/about"       (names[default] + "/" + route)
    account/index -> "/account"

Every other culture is prefixed with its code as spelled in
``supported_cultures``, either through the localized controller name or
the ``{culture}/{controller}`` fallback::

    home/index    -> "/fi"
    account/login -> "/fi/tili/kirjaudu"
"""

import logging

from localroute.config import LocalizationConfig
from localroute.errors import ConfigurationError
from localroute.routing.entries import ActionEntry, ControllerEntry, LocalizedUrl, UrlData
from localroute.routing.registry import LocalizedRouteRegistry, normalize_key

logger = logging.getLogger("localroute.resolver")


def resolve_url(
    registry: LocalizedRouteRegistry,
    config: LocalizationConfig,
    controller: str,
    action: str,
    culture: str,
) -> LocalizedUrl:
    """Resolve the localized URL and link name for a route.

    Raises ``UnknownControllerError`` if *controller* is not registered.
    Raises ``UnknownActionError`` if *action* is not registered for it.
    Raises ``ConfigurationError`` if the route has no default-culture data
    where the resolution needs it.
    """
    entry, action_entry = registry.get_action(controller, action)
    is_home = config.is_default_route(controller, action)
    is_default_action = config.is_default_action(action)

    if config.is_default_culture(culture):
        if is_home:
            return LocalizedUrl("/")

        default = normalize_key(config.default_culture)
        link_data = _url_data(action_entry, default, controller, action)
        controller_url = _default_name(entry, default, controller)
        if is_default_action:
            return LocalizedUrl("/" + controller_url)
        return LocalizedUrl("/" + controller_url + "/" + link_data.route)

    culture = config.canonical_culture(culture)
    culture_key = normalize_key(culture)
    link_data = action_entry.url_data.get(culture_key)
    if link_data is None:
        logger.debug(
            "No %r route for %s.%s, using default culture %r",
            culture,
            controller,
            action,
            config.default_culture,
        )
        link_data = _url_data(
            action_entry, normalize_key(config.default_culture), controller, action
        )

    if is_home:
        return LocalizedUrl("/" + culture, link_data.link_name)

    controller_url = _prefixed_name(entry, culture, culture_key, controller)
    if not is_default_action:
        controller_url += "/"
    return LocalizedUrl("/" + controller_url + link_data.route, link_data.link_name)


def _url_data(action_entry: ActionEntry, culture_key: str, controller: str, action: str) -> UrlData:
    link_data = action_entry.url_data.get(culture_key)
    if link_data is None:
        msg = (
            f"Action {controller!r}.{action!r} has no route for the default "
            f"culture {culture_key!r}. Every action needs default-culture data."
        )
        raise ConfigurationError(msg)
    return link_data


def _default_name(entry: ControllerEntry, culture_key: str, controller: str) -> str:
    name = entry.names.get(culture_key)
    if name is None:
        msg = (
            f"Controller {controller!r} has no name for the default culture "
            f"{culture_key!r}."
        )
        raise ConfigurationError(msg)
    return name


def _prefixed_name(entry: ControllerEntry, culture: str, culture_key: str, controller: str) -> str:
    """Controller segment inside the ``{culture}/`` path prefix.

    Names may be registered bare (``"tili"``) or already prefixed
    (``"fi/tili"``). Without a localized name the raw controller key is used.
    """
    name = entry.names.get(culture_key)
    if name is None:
        return culture + "/" + controller
    if normalize_key(name).startswith(culture_key + "/"):
        return name
    return culture + "/" + name
