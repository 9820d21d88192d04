"""Localized route registry.

Maps controller key -> ControllerEntry -> action key -> ActionEntry.
Populated at startup, then read by any number of concurrent resolvers.
"""

import logging
import threading
from collections.abc import Iterable, Iterator

from localroute.errors import UnknownActionError, UnknownControllerError
from localroute.routing.entries import ActionEntry, ControllerEntry, UrlData

logger = logging.getLogger("localroute.registry")


def normalize_key(key: str) -> str:
    """Controller, action, and culture keys are stored lower-cased."""
    return key.lower()


class LocalizedRouteRegistry:
    """Registry of per-culture controller and action routes.

    Usage::

        registry = LocalizedRouteRegistry()
        registry.add_controller_route("account", "en", "account")
        registry.add_controller_route("account", "fi", "tili")
        registry.add_action_route("account", "login", "en", "login", "Login")
        registry.add_action_route("account", "login", "fi", "kirjaudu", "Kirjaudu")

    Writes are serialized by a lock so that concurrent startup code
    registering different controllers cannot lose entries. Reads never
    take the lock.
    """

    __slots__ = ("_controllers", "_lock")

    def __init__(self) -> None:
        self._controllers: dict[str, ControllerEntry] = {}
        self._lock = threading.Lock()

    # -- Insertion --

    def add_controller_route(self, controller: str, culture: str, name: str) -> None:
        """Set the localized path segment of *controller* for *culture*.

        Creates the controller on first use. A later call for the same
        culture overwrites the earlier name.
        """
        key = normalize_key(controller)
        with self._lock:
            entry = self._controllers.setdefault(key, ControllerEntry())
            entry.names[normalize_key(culture)] = name
        logger.debug("controller %s [%s] -> %r", key, culture, name)

    def add_action_route(
        self,
        controller: str,
        action: str,
        culture: str,
        route: str,
        link_name: str = "",
        parameter_names: Iterable[str] | None = None,
    ) -> None:
        """Set the localized route and link text of an action for *culture*.

        The controller must already be registered. ``parameter_names`` is
        only stored when the action is first created; later calls keep the
        original order.

        Raises ``UnknownControllerError`` if *controller* is not registered.
        """
        controller_key = normalize_key(controller)
        action_key = normalize_key(action)
        with self._lock:
            entry = self._controllers.get(controller_key)
            if entry is None:
                raise UnknownControllerError(
                    controller,
                    f"Cannot add action {action!r}: no controller registered "
                    f"under {controller!r}. Call add_controller_route() first.",
                )
            action_entry = entry.actions.get(action_key)
            if action_entry is None:
                action_entry = ActionEntry(parameter_names=tuple(parameter_names or ()))
                entry.actions[action_key] = action_entry
            action_entry.url_data[normalize_key(culture)] = UrlData(route, link_name)
        logger.debug("action %s.%s [%s] -> %r", controller_key, action_key, culture, route)

    def reset(self) -> None:
        """Remove every controller. Intended for test isolation."""
        with self._lock:
            self._controllers.clear()

    # -- Lookup --

    def get_controller(self, controller: str) -> ControllerEntry:
        """Return the entry for *controller*.

        Raises ``UnknownControllerError`` if it is not registered.
        """
        entry = self._controllers.get(normalize_key(controller))
        if entry is None:
            raise UnknownControllerError(controller)
        return entry

    def get_action(self, controller: str, action: str) -> tuple[ControllerEntry, ActionEntry]:
        """Return the controller entry and action entry for a route.

        Raises ``UnknownControllerError`` or ``UnknownActionError``.
        """
        entry = self.get_controller(controller)
        action_entry = entry.actions.get(normalize_key(action))
        if action_entry is None:
            raise UnknownActionError(controller, action)
        return entry, action_entry

    def find_action(self, controller: str, action: str) -> ActionEntry | None:
        """Like ``get_action`` but returns None instead of raising."""
        entry = self._controllers.get(normalize_key(controller))
        if entry is None:
            return None
        return entry.actions.get(normalize_key(action))

    def has_action(self, controller: str, action: str) -> bool:
        return self.find_action(controller, action) is not None

    @property
    def controllers(self) -> tuple[str, ...]:
        """Registered controller keys (lower-cased)."""
        return tuple(self._controllers)

    def items(self) -> Iterator[tuple[str, ControllerEntry]]:
        """Iterate ``(controller_key, entry)`` pairs over a snapshot."""
        return iter(list(self._controllers.items()))

    def __contains__(self, controller: object) -> bool:
        return isinstance(controller, str) and normalize_key(controller) in self._controllers

    def __len__(self) -> int:
        return len(self._controllers)
