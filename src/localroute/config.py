"""Localization settings.

LocalizationConfig is a frozen dataclass — immutable after creation, set
once before the first resolution call and shared by every reader.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class LocalizationConfig:
    """Localization settings. Immutable after creation.

    Only ``default_culture`` is required in practice::

        config = LocalizationConfig(
            default_culture="en",
            supported_cultures={"en": "English", "fi": "Suomi"},
        )

    ``supported_cultures`` maps culture code to display name. The display
    name is informational; resolution only looks at the codes.
    """

    default_culture: str = "en"
    supported_cultures: Mapping[str, str] = field(default_factory=dict)

    # The "home" route, rendered as "/" (or "/{culture}")
    default_controller: str = "home"
    default_action: str = "index"

    def is_default_culture(self, culture: str) -> bool:
        return culture.lower() == self.default_culture.lower()

    def is_default_controller(self, controller: str) -> bool:
        return controller.lower() == self.default_controller.lower()

    def is_default_action(self, action: str) -> bool:
        return action.lower() == self.default_action.lower()

    def is_default_route(self, controller: str, action: str) -> bool:
        """True when *controller*/*action* name the configured home route."""
        return self.is_default_controller(controller) and self.is_default_action(action)

    def canonical_culture(self, culture: str) -> str:
        """The configured spelling of *culture*, or *culture* if unsupported."""
        key = culture.lower()
        for code in self.supported_cultures:
            if code.lower() == key:
                return code
        return culture

    @property
    def cultures(self) -> tuple[str, ...]:
        """Supported culture codes, in declaration order."""
        return tuple(self.supported_cultures)
