"""Startup validation of a populated registry.

Insertion stays permissive; this check reports the data-integrity
problems that would otherwise surface as errors at resolution time, plus
naming collisions with culture prefixes.
"""

from dataclasses import dataclass, field
from enum import Enum

from localroute.config import LocalizationConfig
from localroute.routing.registry import LocalizedRouteRegistry, normalize_key


class Severity(Enum):
    """Severity of a registry validation issue."""

    ERROR = "error"
    WARNING = "warning"


@dataclass(frozen=True, slots=True)
class RouteIssue:
    """A single problem found in the registry."""

    severity: Severity
    category: str
    message: str
    controller: str | None = None
    action: str | None = None


@dataclass(slots=True)
class CheckResult:
    """Result of ``check_registry``."""

    issues: list[RouteIssue] = field(default_factory=list)
    controllers_checked: int = 0
    actions_checked: int = 0

    @property
    def errors(self) -> list[RouteIssue]:
        return [i for i in self.issues if i.severity == Severity.ERROR]

    @property
    def warnings(self) -> list[RouteIssue]:
        return [i for i in self.issues if i.severity == Severity.WARNING]

    @property
    def ok(self) -> bool:
        return not self.errors

    def summary(self) -> str:
        """Human-readable summary."""
        lines = [
            f"Checked {self.controllers_checked} controllers, "
            f"{self.actions_checked} actions."
        ]
        for issue in self.issues:
            lines.append(f"  {issue.severity.value.upper():<7} [{issue.category}] {issue.message}")
        if self.ok:
            lines.append("No errors.")
        else:
            lines.append(f"{len(self.errors)} error(s), {len(self.warnings)} warning(s).")
        return "\n".join(lines)


def check_registry(registry: LocalizedRouteRegistry, config: LocalizationConfig) -> CheckResult:
    """Validate *registry* against *config*."""
    result = CheckResult()
    default = normalize_key(config.default_culture)
    supported = {normalize_key(c) for c in config.supported_cultures}

    for controller, entry in registry.items():
        result.controllers_checked += 1

        if controller in supported:
            result.issues.append(
                RouteIssue(
                    Severity.WARNING,
                    "culture-collision",
                    f"Controller {controller!r} shares its key with a supported "
                    f"culture; paths under /{controller}/ will be read as that culture.",
                    controller=controller,
                )
            )

        needs_default_name = any(
            not config.is_default_route(controller, action) for action in entry.actions
        )
        if needs_default_name and default not in entry.names:
            result.issues.append(
                RouteIssue(
                    Severity.ERROR,
                    "missing-default-name",
                    f"Controller {controller!r} has no name for the default "
                    f"culture {config.default_culture!r}.",
                    controller=controller,
                )
            )

        for culture in entry.names:
            if supported and culture not in supported:
                result.issues.append(
                    RouteIssue(
                        Severity.WARNING,
                        "unsupported-culture",
                        f"Controller {controller!r} has a name for unsupported "
                        f"culture {culture!r}.",
                        controller=controller,
                    )
                )

        for action, action_entry in entry.actions.items():
            result.actions_checked += 1
            if default not in action_entry.url_data:
                result.issues.append(
                    RouteIssue(
                        Severity.ERROR,
                        "missing-default-route",
                        f"Action {controller!r}.{action!r} has no route for the "
                        f"default culture {config.default_culture!r}.",
                        controller=controller,
                        action=action,
                    )
                )
            for culture in action_entry.url_data:
                if supported and culture not in supported:
                    result.issues.append(
                        RouteIssue(
                            Severity.WARNING,
                            "unsupported-culture",
                            f"Action {controller!r}.{action!r} has a route for "
                            f"unsupported culture {culture!r}.",
                            controller=controller,
                            action=action,
                        )
                    )

    return result
