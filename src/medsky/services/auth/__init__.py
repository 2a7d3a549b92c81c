"""Authentication collaborators."""

from .memory_provider import InMemoryAuthProvider

__all__ = ["InMemoryAuthProvider"]
