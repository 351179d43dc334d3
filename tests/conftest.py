from __future__ import annotations

import json

import pytest

NEG_STATUS_ANNOTATION = json.dumps(
    {
        "network_endpoint_groups": {"80": "k8s1-neg-80", "443": "k8s1-neg-443"},
        "zones": ["us-central1-a", "us-central1-b"],
    }
)


@pytest.fixture
def neg_status_annotation() -> str:
    return NEG_STATUS_ANNOTATION


@pytest.fixture
def neg_status_payload(neg_status_annotation: str) -> dict[str, object]:
    return json.loads(neg_status_annotation)
