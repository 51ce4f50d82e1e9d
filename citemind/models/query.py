"""Query data model."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence


@dataclass(frozen=True)
class Query:
    """A free-text query plus the keywords tracked in provider responses."""

    text: str
    keywords: tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if isinstance(self.keywords, str):
            raise TypeError("keywords must be a sequence of strings, not a single str")
        # Accept any sequence but store a tuple so the query stays immutable
        object.__setattr__(self, "keywords", tuple(self.keywords))

    @classmethod
    def of(cls, text: str, keywords: Sequence[str] = ()) -> Query:
        return cls(text=text, keywords=keywords)
