"""Biomedical literature search clients."""

from .pubmed_client import PubMedClient

__all__ = ["PubMedClient"]
