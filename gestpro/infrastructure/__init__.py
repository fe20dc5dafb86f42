"""Infrastructure layer implementations."""

from gestpro.infrastructure import storage

__all__ = ["storage"]
