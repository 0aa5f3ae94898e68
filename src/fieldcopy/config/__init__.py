"""Configuration module using Pydantic Settings.

Usage:
    from fieldcopy.config import CopySettings

    settings = CopySettings(warn_on_failure=False)
"""

from fieldcopy.config.settings import CopySettings

__all__ = [
    "CopySettings",
]
