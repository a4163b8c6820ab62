"""Assertion helpers for controller tests.

Work on the same ``Response`` type controllers fill in production.
"""

import json
from collections.abc import Mapping
from typing import Any

from starbs.http.response import Response


def assert_json_envelope(
    response: Response,
    key: str,
    data: Mapping[str, Any],
    *,
    status: int,
    content_type: str = "application/json",
) -> None:
    """Assert *response* carries ``{key: data}`` as JSON with *status*.

    Compares parsed JSON and key order, so indentation does not matter.
    """
    assert response.status == status, f"Expected status {status}, got {response.status}"
    assert response.content_type == content_type, (
        f"Expected {content_type}, got {response.content_type!r}"
    )
    payload = json.loads(response.text)
    assert list(payload) == [key], f"Expected envelope key {key!r}, got {list(payload)}"
    assert payload[key] == data, f"Envelope mismatch.\nResponse body: {response.text[:500]}"
    assert list(payload[key]) == list(data), "Envelope key order differs from input"


def assert_redirect(response: Response, url: str, *, status: int = 302) -> None:
    """Assert *response* redirects to *url* with exactly one Location header."""
    assert response.status == status, f"Expected status {status}, got {response.status}"
    locations = response.headers.get_list("location")
    assert locations == [url], f"Expected Location {url!r}, got {locations}"
