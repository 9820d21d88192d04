"""localroute exception hierarchy.

Shared across the registry, resolver, loader, and CLI so every module
raises and catches the same types.
"""


class LocalRouteError(Exception):
    """Base for all localroute-specific errors."""


class ConfigurationError(LocalRouteError):
    """Raised when localization settings or route data are invalid.

    Typically raised while loading a route file at startup, or when a
    resolution hits data that was never registered for the default culture.
    """


class UnknownControllerError(LocalRouteError):
    """A controller key was referenced that was never registered."""

    def __init__(self, controller: str, detail: str = "") -> None:
        self.controller = controller
        super().__init__(
            detail
            or f"No controller registered under {controller!r}. "
            "Check that the controller key is correct."
        )


class UnknownActionError(LocalRouteError):
    """The controller exists but has no entry for the requested action."""

    def __init__(self, controller: str, action: str, detail: str = "") -> None:
        self.controller = controller
        self.action = action
        super().__init__(
            detail
            or f"Controller {controller!r} has no action {action!r}. "
            "Check that the action key is correct."
        )
