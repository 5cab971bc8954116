"""
Base value object class for DDD.
"""
from abc import ABC
from dataclasses import asdict, dataclass, replace
from typing import Any, Dict, TypeVar

V = TypeVar('V', bound='ValueObject')


@dataclass(frozen=True)
class ValueObject(ABC):
    """
    Base value object class.
    Value objects are immutable and compared by their attributes.
    """

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, self.__class__):
            return False
        return self.__dict__ == other.__dict__

    def __hash__(self) -> int:
        return hash(tuple(sorted(self.__dict__.items())))

    def evolve(self: V, **changes: Any) -> V:
        """Return a copy with the given attributes replaced."""
        return replace(self, **changes)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
