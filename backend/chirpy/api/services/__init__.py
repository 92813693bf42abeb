"""
Service layer for the Chirpy API.
"""

from .metrics import HitCounter

__all__ = ["HitCounter"]
