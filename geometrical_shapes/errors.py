from __future__ import annotations


class SceneConfigError(ValueError):
    """Raised when a scene configuration is malformed."""
