"""Utility helpers for MedSky."""

from .sampling import get_random_items, pick_one

__all__ = ["get_random_items", "pick_one"]
