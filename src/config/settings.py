"""
Application settings and configuration

Uses pydantic-settings for type-safe configuration via environment variables.
All settings use INCODE_ prefix (e.g., INCODE_DIRECTIVE_PREFIX=gen).

Settings can also be loaded from a .env file in the project root.
"""

import re

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """
    Application configuration via environment variables.

    Environment variables use INCODE_ prefix.

    Examples:
        INCODE_DIRECTIVE_PREFIX=gen
        INCODE_COMMENT_MARKER=#
        INCODE_VERBOSITY=2
    """

    model_config = SettingsConfigDict(
        env_prefix="INCODE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Directive syntax
    directive_prefix: str = Field(
        default="inj",
        description="Prefix that marks a comment as a directive (// <prefix>:name)",
    )

    comment_marker: str = Field(
        default="//",
        description="Line comment marker that introduces a directive",
    )

    # Logging
    verbosity: int = Field(
        default=0,
        ge=0,
        description="Default LOG() verbosity when none is set for the current context",
    )

    @field_validator("directive_prefix", "comment_marker")
    @classmethod
    def nonEmpty_check(cls, value: str) -> str:
        """Reject empty or whitespace-containing directive syntax parts"""
        if not value or any(c.isspace() for c in value):
            raise ValueError("must be a non-empty string without whitespace")
        return value

    def pattern_make(self, prefix: str | None = None, comment_marker: str | None = None) -> str:
        """
        Build the directive line regex source.

        Args:
            prefix: Directive prefix, defaults to directive_prefix
            comment_marker: Comment marker, defaults to comment_marker

        Returns:
            Regex source with group 1 = comment text, group 2 = directive body

        Example:
            >>> settings = AppSettings()
            >>> settings.pattern_make()
            '^[ \\\\t]*(//[ \\\\t]+inj:(.+))$'
        """
        prefix = self.directive_prefix if prefix is None else prefix
        marker = self.comment_marker if comment_marker is None else comment_marker
        return rf"^[ \t]*({re.escape(marker)}[ \t]+{re.escape(prefix)}:(.+))$"


# Singleton instance - import this in your code
appsettings = AppSettings()
