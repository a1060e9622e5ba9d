from .registry import SessionRegistry
from .store import SessionStore

__all__ = ["SessionRegistry", "SessionStore"]
