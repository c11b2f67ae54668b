"""
Pytest configuration and shared fixtures.

Provides an in-memory Cloudant stand-in that understands the selector subset
the catalog uses, a memory-backed cache with a controllable clock, and
helpers for building httpx clients over MockTransport.
"""

import copy
import re

import httpx
import pytest
from ibm_cloud_sdk_core import ApiException

from app.cache import CacheService
from tech_catalog.catalog_data import DEFAULT_TABLES
from tech_catalog.classifier import SkillClassifier

_MISSING = object()

# ==============================================================================
# Fake Cloudant
# ==============================================================================


class FakeResponse:
    def __init__(self, result):
        self._result = result

    def get_result(self):
        return self._result


def _match_value(value, cond) -> bool:
    if isinstance(cond, dict) and cond and all(k.startswith("$") for k in cond):
        for op, arg in cond.items():
            if op == "$eq":
                ok = value == arg
            elif op == "$ne":
                ok = value != arg
            elif op == "$in":
                ok = value in arg
            elif op == "$gt":
                ok = value is not _MISSING and value > arg
            elif op == "$exists":
                ok = (value is not _MISSING) == arg
            elif op == "$regex":
                ok = isinstance(value, str) and re.search(arg, value) is not None
            elif op == "$elemMatch":
                ok = isinstance(value, list) and any(_match_value(v, arg) for v in value)
            else:
                raise NotImplementedError(op)
            if not ok:
                return False
        return True
    return value == cond


def matches_selector(doc: dict, selector: dict) -> bool:
    for key, cond in selector.items():
        if key == "$or":
            if not any(matches_selector(doc, s) for s in cond):
                return False
        elif key == "$and":
            if not all(matches_selector(doc, s) for s in cond):
                return False
        elif not _match_value(doc.get(key, _MISSING), cond):
            return False
    return True


class FakeCloudant:
    """Just enough of CloudantV1 for the store, query service and ops script."""

    def __init__(self):
        self.dbs: dict[str, dict[str, dict]] = {}
        self.indexes: list[dict] = []
        self.fail_ids: set[str] = set()
        self.find_calls = 0
        self.bulk_calls = 0

    def docs(self, db: str) -> dict[str, dict]:
        return self.dbs.setdefault(db, {})

    def put_database(self, db):
        if db in self.dbs:
            raise ApiException(412, message="The database could not be created, the file already exists.")
        self.dbs[db] = {}
        return FakeResponse({"ok": True})

    def post_all_docs(self, db, keys=None, include_docs=False, **_kwargs):
        store = self.docs(db)
        rows = []
        for key in keys or sorted(store):
            doc = store.get(key)
            if doc is None:
                rows.append({"key": key, "error": "not_found"})
                continue
            row = {"id": key, "key": key, "value": {"rev": doc["_rev"]}}
            if include_docs:
                row["doc"] = copy.deepcopy(doc)
            rows.append(row)
        return FakeResponse({"total_rows": len(store), "rows": rows})

    def post_bulk_docs(self, db, bulk_docs):
        self.bulk_calls += 1
        if hasattr(bulk_docs, "to_dict"):
            bulk_docs = bulk_docs.to_dict()
        store = self.docs(db)
        results = []
        for doc in bulk_docs["docs"]:
            doc_id = doc["_id"]
            existing = store.get(doc_id)
            if doc_id in self.fail_ids:
                results.append({"id": doc_id, "error": "forbidden", "reason": "rejected by test"})
                continue
            current_rev = existing["_rev"] if existing else None
            if doc.get("_rev") != current_rev:
                results.append({"id": doc_id, "error": "conflict", "reason": "Document update conflict."})
                continue
            generation = int(current_rev.split("-")[0]) + 1 if current_rev else 1
            stored = copy.deepcopy(doc)
            stored["_rev"] = f"{generation}-fake"
            store[doc_id] = stored
            results.append({"id": doc_id, "rev": stored["_rev"], "ok": True})
        return FakeResponse(results)

    def post_find(self, db, selector, limit=25, bookmark=None, **_kwargs):
        self.find_calls += 1
        found = [
            copy.deepcopy(doc)
            for _, doc in sorted(self.docs(db).items())
            if matches_selector(doc, selector)
        ]
        offset = int(bookmark or 0)
        page = found[offset:offset + limit]
        return FakeResponse({"docs": page, "bookmark": str(offset + len(page))})

    def post_index(self, db, index, **kwargs):
        self.indexes.append({"db": db, "index": index, **kwargs})
        return FakeResponse({"result": "created", "name": kwargs.get("name")})


class FakeClock:
    def __init__(self, now: float = 1000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


DB_NAME = "tech_catalog_test"


@pytest.fixture
def fake_cloudant():
    client = FakeCloudant()
    client.dbs[DB_NAME] = {}
    return client


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def cache(clock):
    return CacheService(redis_url=None, clock=clock)


# ==============================================================================
# Catalog tables
# ==============================================================================


@pytest.fixture
def tables():
    return DEFAULT_TABLES


@pytest.fixture
def classifier(tables):
    return SkillClassifier(tables)


# ==============================================================================
# HTTP
# ==============================================================================


def mock_http(handler) -> httpx.Client:
    """httpx.Client whose requests are answered by handler(request) -> httpx.Response."""
    return httpx.Client(transport=httpx.MockTransport(handler))


LINGUIST_YAML = """\
---
Brainfuck:
  type: programming
  color: "#2F2530"
  extensions:
  - ".b"
  - ".bf"
C++:
  type: programming
  color: "#f34b7d"
  aliases:
  - cpp
  extensions:
  - ".cpp"
  - ".h"
JSON:
  type: data
  extensions:
  - ".json"
JavaScript:
  type: programming
  color: "#f1e05a"
  aliases:
  - js
  - node
  - js
  extensions:
  - ".js"
  - ".mjs"
Markdown:
  type: prose
  extensions:
  - ".md"
Python:
  type: programming
  color: "#3572A5"
  aliases:
  - python3
  - rusthon
  extensions:
  - ".py"
  - ".pyw"
Zig:
  type: programming
  color: "#ec915c"
  extensions:
  - ".zig"
"""


@pytest.fixture
def linguist_yaml():
    return LINGUIST_YAML


def tag_page(names_counts, has_more=True, **extra) -> dict:
    """One Stack Exchange /tags response body."""
    body = {
        "items": [{"name": n, "count": c} for n, c in names_counts],
        "has_more": has_more,
        "quota_remaining": 9999,
    }
    body.update(extra)
    return body


@pytest.fixture
def make_http():
    return mock_http


@pytest.fixture
def make_tag_page():
    return tag_page
