"""Wire types exchanged between the server and its clients."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

AUTH_HEADER = "EBOBO-FINGERPRINT"


def _field(data: Any, name: str, kind: type, *, optional: bool = False) -> Any:
    if not isinstance(data, Mapping):
        raise ValueError(f"expected an object, got {type(data).__name__}")
    value = data.get(name)
    if value is None:
        if optional:
            return None
        raise ValueError(f"missing field {name!r}")
    if kind is int and isinstance(value, bool) or not isinstance(value, kind):
        raise ValueError(f"field {name!r} must be {kind.__name__}")
    return value


def _string(data: Any, what: str) -> str:
    if not isinstance(data, str):
        raise ValueError(f"{what} must be a string")
    return data


@dataclass(frozen=True)
class Index:
    """Greeting returned by the index endpoint."""

    fighter: str | None
    rank: int | None
    greet: str

    def to_dict(self) -> dict[str, Any]:
        return {"fighter": self.fighter, "rank": self.rank, "greet": self.greet}

    @classmethod
    def from_dict(cls, data: Any) -> Index:
        return cls(
            fighter=_field(data, "fighter", str, optional=True),
            rank=_field(data, "rank", int, optional=True),
            greet=_field(data, "greet", str),
        )


@dataclass(frozen=True)
class Arena:
    """Arena overview for the current fighter."""

    total: int
    queue: int
    rank: int
    you: str

    def to_dict(self) -> dict[str, Any]:
        return {"total": self.total, "queue": self.queue, "rank": self.rank, "you": self.you}

    @classmethod
    def from_dict(cls, data: Any) -> Arena:
        return cls(
            total=_field(data, "total", int),
            queue=_field(data, "queue", int),
            rank=_field(data, "rank", int),
            you=_field(data, "you", str),
        )


@dataclass(frozen=True)
class Fighter:
    """A fighter emoji; serialised as a bare JSON string."""

    value: str

    def to_json(self) -> str:
        return self.value

    @classmethod
    def from_json(cls, data: Any) -> Fighter:
        return cls(_string(data, "fighter"))


@dataclass(frozen=True)
class Choice:
    """The fighter a user picks; serialised as a bare JSON string."""

    value: str

    def to_json(self) -> str:
        return self.value

    @classmethod
    def from_json(cls, data: Any) -> Choice:
        return cls(_string(data, "choice"))