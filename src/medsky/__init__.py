"""MedSky - case-study quiz service for medical students."""

__version__ = "1.0.0"
