"""FastAPI application layer for MedSky."""
