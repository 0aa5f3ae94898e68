"""Configuration settings using Pydantic Settings.

Provides typed configuration for the copier with environment variable support.

Usage:
    from fieldcopy.config import CopySettings

    # Load from environment variables (FIELDCOPY_*)
    settings = CopySettings()

    # Or override with explicit values
    settings = CopySettings(force_access=False)
    copy_fields(source, target, settings=settings)
"""

from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


class CopySettings(BaseSettings):  # type: ignore[misc]
    """Configuration for copy operations.

    Attributes:
        force_access: Retry writes rejected by ``__setattr__`` (frozen dataclasses,
            frozen pydantic models) with ``object.__setattr__``.
        warn_on_failure: Emit a CopyWarning when copy_create/copy_fields turn a
            failure into None/False.

    Environment Variables:
        FIELDCOPY_FORCE_ACCESS
        FIELDCOPY_WARN_ON_FAILURE
    """

    model_config = SettingsConfigDict(
        env_prefix="FIELDCOPY_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    force_access: bool = True
    warn_on_failure: bool = True
