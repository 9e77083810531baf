"""Service layer over the ORM models."""

from .award import AwardService

__all__ = ["AwardService"]
