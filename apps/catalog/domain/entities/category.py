"""
Category entity.
"""
from dataclasses import dataclass, field
from typing import Iterator, Optional, Tuple


@dataclass(frozen=True)
class Category:
    """Catalog category, possibly with nested children."""
    id: str
    name: str
    parent_id: Optional[str] = None
    children: Tuple['Category', ...] = field(default_factory=tuple)

    @property
    def is_root(self) -> bool:
        """Check if this is a root category."""
        return self.parent_id is None

    def walk(self) -> Iterator['Category']:
        """Yield this category and all of its descendants depth-first."""
        yield self
        for child in self.children:
            yield from child.walk()
