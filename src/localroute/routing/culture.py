"""Culture detection from a URL path.

A path belongs to a culture when it starts with ``/{culture}/``. A
controller whose key equals a supported culture code cannot be told apart
from that culture's prefix, so controllers must never be named after a
culture (``check_registry`` reports such collisions). Matching is
case-sensitive; ``resolve_url`` writes the prefix as spelled in
``supported_cultures`` so generated URLs always match.
"""

from localroute.config import LocalizationConfig


def detect_culture(config: LocalizationConfig, path: str) -> str:
    """Return the first supported culture whose prefix matches *path*.

    Falls back to the default culture when nothing matches.
    """
    for culture in config.supported_cultures:
        if path.startswith(f"/{culture}/"):
            return culture
    return config.default_culture
