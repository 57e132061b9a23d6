"""Velocity repositories."""

from app.repositories.velocity.history import VelocityRepository

__all__ = [
    "VelocityRepository",
]
