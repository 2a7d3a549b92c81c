"""Shared test fixtures."""

import os
import sys
import time
from typing import Dict, List, Optional

import pytest

os.environ["MEDSKY_ENV"] = "testing"

# Add src to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '../src'))


class FakeLiteratureClient:
    """Scripted stand-in for PubMedClient.

    ``searches`` maps a query to the ids it returns and ``titles`` maps an id
    to its title. Unknown queries return no ids and unknown ids no title.
    """

    def __init__(self, searches: Optional[Dict[str, List[str]]] = None,
                 titles: Optional[Dict[str, str]] = None,
                 fail_search: bool = False, fail_title: bool = False,
                 delay: float = 0.0):
        self.searches = searches or {}
        self.titles = titles or {}
        self.fail_search = fail_search
        self.fail_title = fail_title
        self.delay = delay
        self.calls = []

    def search_ids(self, query: str, retmax: int) -> List[str]:
        self.calls.append(("search_ids", query, retmax))
        if self.delay:
            time.sleep(self.delay)
        if self.fail_search:
            raise ConnectionError("network unreachable")
        return list(self.searches.get(query, []))[:retmax]

    def fetch_title(self, pmid: str) -> Optional[str]:
        self.calls.append(("fetch_title", pmid))
        if self.fail_title:
            raise ConnectionError("network unreachable")
        return self.titles.get(pmid)


@pytest.fixture
def fake_client():
    """Literature client that finds nothing."""
    return FakeLiteratureClient()


@pytest.fixture
def asthma_client():
    """Literature client scripted for the pediatrics asthma case."""
    return FakeLiteratureClient(
        searches={
            "pediatric diagnosis": ["111"],
            "Asthma diagnosis": ["222"],
        },
        titles={
            "111": "Asthma in children: a review",
            "222": "Guidelines for Asthma",
        },
    )
