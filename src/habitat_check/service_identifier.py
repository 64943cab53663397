"""Supervisor service group identifiers (``name.group``)."""

from __future__ import annotations

from dataclasses import dataclass

_SEPARATOR = "."


@dataclass(frozen=True)
class ServiceIdentifier:
    """A managed service instance as addressed by the supervisor API."""

    name: str
    group: str

    @classmethod
    def parse(cls, raw: str) -> "ServiceIdentifier":
        """Split ``name.group`` on the first separator; both halves must be non-empty."""
        if not isinstance(raw, str):
            raise ValueError(f"Service identifier must be a string (got {raw!r})")
        name, separator, group = raw.partition(_SEPARATOR)
        if not separator or not name or not group:
            raise ValueError(f"Service identifier {raw!r} is not in name.group form")
        return cls(name=name, group=group)

    @property
    def health_path(self) -> str:
        return f"/services/{self.name}/{self.group}/health"

    def __str__(self) -> str:
        return f"{self.name}{_SEPARATOR}{self.group}"


__all__ = ["ServiceIdentifier"]
