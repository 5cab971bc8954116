from .session_stores import DjangoSessionStore, InMemorySessionStore

__all__ = ['DjangoSessionStore', 'InMemorySessionStore']
