"""Infrastructure helpers for the user domain."""

from user_core.infra.locks import ReadWriteLock

__all__ = ["ReadWriteLock"]
