"""localroute — per-culture URLs for controller/action routes.

Serves the same logical page under language-specific paths (``/about``
in one culture, ``/fi/meista`` in another) from a single route registry.

Basic usage::

    from localroute import LocalizationConfig, Localizer

    localizer = Localizer(LocalizationConfig(default_culture="en",
                                             supported_cultures={"en": "English", "fi": "Suomi"}))
    localizer.registry.add_controller_route("home", "en", "home")
    localizer.registry.add_controller_route("home", "fi", "koti")
    localizer.registry.add_action_route("home", "about", "en", "about", "About")
    localizer.registry.add_action_route("home", "about", "fi", "meista", "Meistä")

    localizer.url_for("home", "about", "fi")   # "/fi/koti/meista"

Route files::

    from localroute.loader import load_route_file
    config, registry = load_route_file("routes.toml")
"""

__version__ = "0.1.0"
__all__ = [
    "CheckResult",
    "ConfigurationError",
    "LocalRouteError",
    "LocalizationConfig",
    "LocalizedRouteRegistry",
    "LocalizedUrl",
    "Localizer",
    "UnknownActionError",
    "UnknownControllerError",
    "check_registry",
    "detect_culture",
    "load_route_file",
    "ordered_parameter_suffix",
    "resolve_url",
]

# name -> defining module. Keeps ``import localroute`` cheap.
_LAZY_IMPORTS: dict[str, str] = {
    "CheckResult": "localroute.routing.validation",
    "ConfigurationError": "localroute.errors",
    "LocalRouteError": "localroute.errors",
    "LocalizationConfig": "localroute.config",
    "LocalizedRouteRegistry": "localroute.routing.registry",
    "LocalizedUrl": "localroute.routing.entries",
    "Localizer": "localroute.localizer",
    "UnknownActionError": "localroute.errors",
    "UnknownControllerError": "localroute.errors",
    "check_registry": "localroute.routing.validation",
    "detect_culture": "localroute.routing.culture",
    "load_route_file": "localroute.loader",
    "ordered_parameter_suffix": "localroute.routing.params",
    "resolve_url": "localroute.routing.resolver",
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API."""
    module_path = _LAZY_IMPORTS.get(name)
    if module_path is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)

    import importlib

    return getattr(importlib.import_module(module_path), name)
