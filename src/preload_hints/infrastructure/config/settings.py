"""Pydantic settings for preload-hints.toml configuration."""

import tomllib
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, field_validator

from ...application.dto.options import PreloadOptions
from ...application.services.association import BuildVersion
from .environment import get_env, load_environment_variables, resolve_config_path


class OutputSettings(BaseModel):
    """Build output settings shared by every document."""

    public_path: str = ""
    build_version: str = BuildVersion.V4.value

    def __init__(self, **data: Any) -> None:
        """Initialize with environment variable precedence."""
        load_environment_variables()

        # Environment variables take precedence over TOML values
        env_public_path = get_env("PRELOAD_HINTS_PUBLIC_PATH")
        if env_public_path is not None:
            data["public_path"] = env_public_path

        env_build_version = get_env("PRELOAD_HINTS_BUILD_VERSION")
        if env_build_version is not None:
            data["build_version"] = env_build_version

        super().__init__(**data)

    @field_validator("build_version")
    @classmethod
    def validate_build_version(cls, v: str) -> str:
        """Fail fast on unsupported association variants."""
        return BuildVersion.parse(v).value


class Settings(BaseModel):
    """Main settings loaded from preload-hints.toml."""

    preload: dict[str, Any] = Field(default_factory=dict)
    output: OutputSettings = Field(default_factory=OutputSettings)

    @classmethod
    def from_toml(cls, toml_path: Path | str | None = None) -> "Settings":
        """
        Load settings from preload-hints.toml with environment variable precedence.

        Args:
            toml_path: Path to the TOML file; PRELOAD_HINTS_CONFIG or
                       preload-hints.toml when omitted

        Returns:
            Settings instance; defaults when the file doesn't exist

        Raises:
            InvalidOptionError: If the [preload] table holds invalid options
            pydantic.ValidationError: If [output] build_version is unknown
        """
        load_environment_variables()

        path = resolve_config_path(toml_path)
        if not path.exists():
            return cls()

        with path.open("rb") as f:
            data = tomllib.load(f)

        settings = cls(
            preload=data.get("preload", {}),
            output=OutputSettings(**data.get("output", {})),
        )
        # Surface option errors at load time rather than on the first document
        settings.to_options()
        return settings

    def to_options(self, **overrides: Any) -> PreloadOptions:
        """
        Build validated plugin options, applying non-None overrides on top of [preload].

        Raises:
            InvalidOptionError: If any option fails validation
        """
        data = dict(self.preload)
        data.update({key: value for key, value in overrides.items() if value is not None})
        return PreloadOptions.from_mapping(data)
