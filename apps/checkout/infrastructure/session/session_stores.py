"""
SessionStore implementations.
"""
from typing import Dict, MutableMapping, Optional

from ...domain.repositories import SessionStore


class DjangoSessionStore(SessionStore):
    """Keeps the opaque ids in the request's Django session."""

    def __init__(self, session: MutableMapping):
        self.session = session

    def get(self, key: str) -> Optional[str]:
        return self.session.get(key)

    def set(self, key: str, value: str) -> None:
        self.session[key] = value

    def remove(self, key: str) -> None:
        self.session.pop(key, None)


class InMemorySessionStore(SessionStore):
    """Dictionary-backed store for tests and scripts."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self.values: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self.values.get(key)

    def set(self, key: str, value: str) -> None:
        self.values[key] = value

    def remove(self, key: str) -> None:
        self.values.pop(key, None)
