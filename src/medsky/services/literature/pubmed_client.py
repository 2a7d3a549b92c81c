"""
PubMed search client over the NCBI E-utilities API.

Both operations are best-effort: HTTP errors, timeouts and malformed payloads
are logged and reported as "not found" so callers can fall back to static data.
"""

import logging
from typing import Any, Dict, List, Optional

import requests

from medsky.core.config_helper import config

logger = logging.getLogger(__name__)


class PubMedClient:
    """
    Search PubMed and fetch article titles.

    Uses ``esearch.fcgi`` for identifier lists and ``esummary.fcgi`` for titles.
    """

    def __init__(self, base_url: Optional[str] = None, api_key: Optional[str] = None,
                 timeout: Optional[float] = None, session: Optional[requests.Session] = None):
        """Initialize the client.

        Args:
            base_url: E-utilities base URL (defaults to config.PUBMED_API_URL)
            api_key: Optional NCBI API key (defaults to config.PUBMED_API_KEY)
            timeout: Per-request timeout in seconds
            session: Reusable HTTP session
        """
        self.base_url = (base_url or config.PUBMED_API_URL).rstrip("/")
        self.api_key = api_key if api_key is not None else config.PUBMED_API_KEY
        self.timeout = timeout if timeout is not None else config.PUBMED_TIMEOUT_SECONDS
        self.session = session or requests.Session()

    def _get(self, endpoint: str, params: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        params = {"db": "pubmed", "retmode": "json", **params}
        if self.api_key:
            params["api_key"] = self.api_key

        try:
            response = self.session.get(
                f"{self.base_url}/{endpoint}",
                params=params,
                timeout=self.timeout
            )
            response.raise_for_status()
            data = response.json()
        except requests.exceptions.RequestException as e:
            logger.warning(f"PubMed {endpoint} request failed: {e}")
            return None
        except ValueError as e:
            logger.warning(f"PubMed {endpoint} returned malformed JSON: {e}")
            return None

        if not isinstance(data, dict):
            logger.warning(f"PubMed {endpoint} returned unexpected payload type: {type(data).__name__}")
            return None
        return data

    def search_ids(self, query: str, retmax: int) -> List[str]:
        """
        Search PubMed for a query.

        Args:
            query: Free-text search term
            retmax: Maximum number of identifiers to return

        Returns:
            Ordered list of PMIDs (empty on no results or failure)
        """
        data = self._get("esearch.fcgi", {"term": query, "retmax": retmax})
        if data is None:
            return []

        search_result = data.get("esearchresult")
        if not isinstance(search_result, dict):
            logger.warning(f"PubMed search for {query!r} missing esearchresult")
            return []

        ids = search_result.get("idlist") or []
        if not isinstance(ids, list):
            return []

        logger.info(f"PubMed esearch returned {len(ids)} IDs for query: {query}")
        return [str(pmid) for pmid in ids[:retmax]]

    def fetch_title(self, pmid: str) -> Optional[str]:
        """
        Fetch the title of one PubMed article.

        Args:
            pmid: PubMed identifier

        Returns:
            Article title, or None if unavailable
        """
        data = self._get("esummary.fcgi", {"id": pmid})
        if data is None:
            return None

        result = data.get("result")
        if not isinstance(result, dict):
            return None

        item = result.get(pmid)
        if not isinstance(item, dict):
            return None

        title = item.get("title")
        if not isinstance(title, str) or not title.strip():
            return None
        return title.strip()

    def close(self) -> None:
        self.session.close()
