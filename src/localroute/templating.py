"""Kida template globals for localized links.

Registers helpers on a kida Environment so templates can build links
without knowing the culture-specific paths::

    <a href="{{ localized_url('account', 'login', culture) }}">
      {{ localized_link_name('account', 'login', culture, 'Log in') }}
    </a>
"""

from typing import Any

from kida import Environment

from localroute.localizer import Localizer


def template_globals(localizer: Localizer) -> dict[str, Any]:
    """Template globals bound to *localizer*."""
    return {
        "localized_url": localizer.url_for,
        "localized_link_name": localizer.link_name,
        "detect_culture": localizer.detect_culture,
        "default_culture": localizer.config.default_culture,
    }


def register_template_globals(env: Environment, localizer: Localizer) -> Environment:
    """Add the localization globals to *env* and return it."""
    for name, value in template_globals(localizer).items():
        env.add_global(name, value)
    return env
