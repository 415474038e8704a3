from dataclasses import dataclass

from ..errors import InvalidLinkDescriptor

PRELOAD = "preload"
PREFETCH = "prefetch"
FONT = "font"
ANONYMOUS = "anonymous"


@dataclass(frozen=True)
class LinkDescriptor:
    """
    Resolved attributes for one resource hint.

    Fields:
        href: Resource URL (public path + file)
        rel: Link relation keyword
        as_: Resource type, only for preload links
        crossorigin: CORS mode, only for preloaded fonts
    """

    href: str
    rel: str
    as_: str | None = None
    crossorigin: str | None = None

    def __post_init__(self) -> None:
        """Validate attribute invariants."""
        if self.rel != PRELOAD and (self.as_ is not None or self.crossorigin is not None):
            raise InvalidLinkDescriptor(
                f"'as' and 'crossorigin' are only allowed with rel='{PRELOAD}', got rel={self.rel!r}"
            )
        if self.crossorigin is not None and self.as_ != FONT:
            raise InvalidLinkDescriptor(
                f"'crossorigin' is only allowed with as='{FONT}', got as={self.as_!r}"
            )

    def to_attributes(self) -> dict[str, str]:
        """Attributes in render order: href, rel, then as and crossorigin when set."""
        attributes = {"href": self.href, "rel": self.rel}
        if self.as_ is not None:
            attributes["as"] = self.as_
        if self.crossorigin is not None:
            attributes["crossorigin"] = self.crossorigin
        return attributes
