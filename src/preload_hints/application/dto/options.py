from __future__ import annotations

import re
from typing import Any, Callable, Literal, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ...domain.errors import InvalidOptionError
from ...domain.policy.selection_policy import SelectionPolicy

IncludeMode = Literal["allChunks", "allAssets", "asyncChunks", "initial"]
AsOption = Union[str, dict[str, str], Callable[[str], Optional[str]], None]

ALL_ASSETS = "allAssets"
ALL_CHUNKS = "allChunks"
ASYNC_CHUNKS = "asyncChunks"
INITIAL = "initial"


def _default_blacklist() -> list[re.Pattern[str]]:
    # Source maps are never worth a resource hint.
    return [re.compile(r"\.map")]


class PreloadOptions(BaseModel):
    """Options controlling which files get resource hints and how they are rendered."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    rel: str = "preload"
    include: IncludeMode | list[str] = ALL_CHUNKS
    as_: AsOption = Field(default=None, alias="as")
    file_whitelist: list[re.Pattern[str]] | None = Field(default=None, alias="fileWhitelist")
    file_blacklist: list[re.Pattern[str]] | None = Field(
        default_factory=_default_blacklist, alias="fileBlacklist"
    )
    exclude_html_names: list[str] = Field(default_factory=list, alias="excludeHtmlNames")
    html_plugin: Any = Field(default=None, alias="htmlPlugin")

    @field_validator("rel")
    @classmethod
    def validate_rel(cls, v: str) -> str:
        """Reject empty relation keywords."""
        if not v.strip():
            raise ValueError("rel must be a non-empty link relation keyword")
        return v

    @field_validator("as_")
    @classmethod
    def validate_as(cls, v: AsOption) -> AsOption:
        """Reject empty fixed values and uncompilable override patterns."""
        if isinstance(v, str) and not v.strip():
            raise ValueError("a fixed 'as' value must be non-empty")
        if isinstance(v, dict):
            for pattern in v:
                try:
                    re.compile(pattern)
                except re.error as e:
                    raise ValueError(f"invalid pattern {pattern!r} in 'as' mapping: {e}") from e
        return v

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any] | None = None) -> "PreloadOptions":
        """
        Build options from a plain mapping (camelCase or snake_case keys).

        Raises:
            InvalidOptionError: If any option fails validation
        """
        try:
            return cls.model_validate(dict(data or {}))
        except ValidationError as e:
            error = e.errors()[0]
            # Union members add their own loc parts; the option name is enough
            option = str(error["loc"][0]) if error["loc"] else "options"
            raise InvalidOptionError(option, error.get("input"), hint=error["msg"]) from e

    @property
    def selection_policy(self) -> SelectionPolicy:
        return SelectionPolicy(
            allow=tuple(self.file_whitelist) if self.file_whitelist is not None else None,
            deny=tuple(self.file_blacklist) if self.file_blacklist is not None else None,
        )

    @property
    def include_all_assets(self) -> bool:
        return self.include == ALL_ASSETS
