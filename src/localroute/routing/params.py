"""Trailing route parameters in declaration order.

For ``/{controller}/{action}/{param1}/{param2}`` the suffix is built from
the action's declared parameter names, not from the order of the caller's
route values.
"""

from collections.abc import Mapping
from typing import Any

from localroute.routing.registry import LocalizedRouteRegistry


def ordered_parameter_suffix(
    registry: LocalizedRouteRegistry,
    controller: str,
    action: str,
    route_values: Mapping[str, Any],
) -> str:
    """Return ``"/value1/value2..."`` for the declared parameters of an action.

    Stops at the first declared parameter missing from *route_values*, so
    the result always covers a leading run of the declared order. A ``None``
    value counts as missing. Returns ``""`` for unknown routes or actions
    without declared parameters.
    """
    action_entry = registry.find_action(controller, action)
    if action_entry is None:
        return ""

    parts: list[str] = []
    for name in action_entry.parameter_names:
        value = route_values.get(name)
        if value is None:
            break
        parts.append(f"/{value}")
    return "".join(parts)
