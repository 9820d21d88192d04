"""Load localization settings and routes from TOML.

File layout::

    [localization]
    default_culture = "en"
    default_controller = "home"      # optional
    default_action = "index"         # optional

    [localization.cultures]
    en = "English"
    fi = "Suomi"

    [controllers.account.names]
    en = "account"
    fi = "tili"

    [controllers.account.actions.login]
    parameters = ["id", "slug"]      # optional

    [controllers.account.actions.login.cultures.fi]
    route = "kirjaudu"
    link_name = "Kirjaudu"
"""

import logging
import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from localroute.config import LocalizationConfig
from localroute.errors import ConfigurationError
from localroute.routing.registry import LocalizedRouteRegistry

logger = logging.getLogger("localroute.loader")


def load_route_file(path: str | Path) -> tuple[LocalizationConfig, LocalizedRouteRegistry]:
    """Read a TOML route file into a config and a freshly populated registry.

    Raises:
        FileNotFoundError: If *path* does not exist
        ConfigurationError: If the file is not valid TOML or its content is invalid
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Route file not found: {path}")

    with path.open("rb") as f:
        try:
            data = tomllib.load(f)
        except tomllib.TOMLDecodeError as exc:
            raise ConfigurationError(f"{path}: {exc}") from exc

    config = load_config(data)
    registry = LocalizedRouteRegistry()
    populate_registry(registry, data)
    logger.info(
        "Loaded %d controllers for %d cultures from %s",
        len(registry),
        len(config.supported_cultures),
        path,
    )
    return config, registry


def load_config(data: Mapping[str, Any]) -> LocalizationConfig:
    """Build a ``LocalizationConfig`` from the ``[localization]`` table.

    The default culture must be one of the declared cultures.
    """
    section = _table(data.get("localization"), "localization")

    cultures = _table(section.get("cultures", {}), "localization.cultures")
    supported: dict[str, str] = {}
    for code, display in cultures.items():
        supported[code] = _string(display, f"localization.cultures.{code}")

    default_culture = _string(section.get("default_culture"), "localization.default_culture")
    if supported and default_culture not in supported:
        msg = (
            f"localization.default_culture {default_culture!r} is not one of "
            f"the declared cultures: {sorted(supported)}"
        )
        raise ConfigurationError(msg)

    return LocalizationConfig(
        default_culture=default_culture,
        supported_cultures=supported,
        default_controller=_string(
            section.get("default_controller", "home"), "localization.default_controller"
        ),
        default_action=_string(
            section.get("default_action", "index"), "localization.default_action"
        ),
    )


def populate_registry(registry: LocalizedRouteRegistry, data: Mapping[str, Any]) -> None:
    """Insert every controller and action of the ``[controllers]`` table."""
    controllers = _table(data.get("controllers", {}), "controllers")

    for controller, raw in controllers.items():
        where = f"controllers.{controller}"
        section = _table(raw, where)

        names = _table(section.get("names", {}), f"{where}.names")
        for culture, name in names.items():
            registry.add_controller_route(controller, culture, _string(name, f"{where}.names.{culture}"))

        actions = _table(section.get("actions", {}), f"{where}.actions")
        if actions and not names:
            # Actions still need a controller entry to attach to.
            msg = f"{where} declares actions but no names"
            raise ConfigurationError(msg)

        for action, raw_action in actions.items():
            action_where = f"{where}.actions.{action}"
            action_section = _table(raw_action, action_where)
            parameters = _string_list(
                action_section.get("parameters", []), f"{action_where}.parameters"
            )
            cultures = _table(action_section.get("cultures", {}), f"{action_where}.cultures")
            for culture, raw_url in cultures.items():
                url_where = f"{action_where}.cultures.{culture}"
                url = _table(raw_url, url_where)
                registry.add_action_route(
                    controller,
                    action,
                    culture,
                    _string(url.get("route"), f"{url_where}.route"),
                    _string(url.get("link_name", ""), f"{url_where}.link_name"),
                    parameters,
                )


def _table(value: object, where: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"{where} must be a table")
    return value


def _string(value: object, where: str) -> str:
    if not isinstance(value, str):
        raise ConfigurationError(f"{where} must be a string")
    return value


def _string_list(value: object, where: str) -> list[str]:
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ConfigurationError(f"{where} must be a list of strings")
    return value
