"""Registry entries and the resolved-URL result."""

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class UrlData:
    """The localized route text and link text of one action in one culture."""

    route: str
    link_name: str = ""


@dataclass(slots=True)
class ActionEntry:
    """Per-culture URL data for one action.

    ``parameter_names`` declares the order in which trailing route
    parameters appear in generated URLs. Fixed when the entry is created.
    """

    parameter_names: tuple[str, ...] = ()
    url_data: dict[str, UrlData] = field(default_factory=dict)


@dataclass(slots=True)
class ControllerEntry:
    """Localized path segments of one controller plus its actions.

    ``names``:   culture -> controller path segment   (``{"fi": "tili"}``)
    ``actions``: action key -> ActionEntry            (``{"login": ...}``)
    """

    names: dict[str, str] = field(default_factory=dict)
    actions: dict[str, ActionEntry] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class LocalizedUrl:
    """Result of a successful resolution.

    ``link_name`` is empty for the default culture so callers keep their
    own link text there.
    """

    url: str
    link_name: str = ""
