"""Domain entities — pure data structures with no external dependencies."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class EntryType(str, Enum):
    """Kind of item returned by the Contents API."""

    FILE = "file"
    DIR = "dir"
    OTHER = "other"  # symlink, submodule

    @classmethod
    def parse(cls, raw: str) -> EntryType:
        try:
            return cls(raw)
        except ValueError:
            return cls.OTHER


@dataclass(frozen=True, slots=True)
class Entry:
    """A single item of a directory listing."""

    name: str
    type: EntryType


@dataclass(frozen=True, slots=True)
class TreeSettings:
    """Resolved parameters of one run; also the shape of the inputs file."""

    owner: str
    repo: str
    path: str = ""
    max_depth: int = 1

    def __post_init__(self) -> None:
        if self.max_depth < 1:
            object.__setattr__(self, "max_depth", 1)

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.repo}"
