import re
from dataclasses import dataclass
from typing import Sequence


def _compile_all(patterns: Sequence[str | re.Pattern[str]]) -> tuple[re.Pattern[str], ...]:
    return tuple(p if isinstance(p, re.Pattern) else re.compile(p) for p in patterns)


@dataclass(frozen=True)
class SelectionPolicy:
    """
    Allow-list and deny-list applied to candidate file paths.

    Patterns are regular expressions searched anywhere in the path.
    A list set to None places no constraint.
    """

    allow: tuple[re.Pattern[str], ...] | None = None
    deny: tuple[re.Pattern[str], ...] | None = None

    def __post_init__(self) -> None:
        """Compile string patterns."""
        if self.allow is not None:
            object.__setattr__(self, "allow", _compile_all(self.allow))
        if self.deny is not None:
            object.__setattr__(self, "deny", _compile_all(self.deny))

    def is_allowed(self, file: str) -> bool:
        return self.allow is None or any(p.search(file) for p in self.allow)

    def is_denied(self, file: str) -> bool:
        return self.deny is not None and any(p.search(file) for p in self.deny)

    def accepts(self, file: str) -> bool:
        return self.is_allowed(file) and not self.is_denied(file)
