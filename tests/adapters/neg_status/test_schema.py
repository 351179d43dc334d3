"""Schema validation for NEG status payloads."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from negsync.adapters.neg_status.schema import NegStatusPayload
from negsync.adapters.neg_status.translator import to_domain, to_payload
from negsync.domain.status import NegStatus


def test_schema_accepts_status_payload(neg_status_payload: dict[str, object]) -> None:
    parsed = NegStatusPayload.model_validate(neg_status_payload)

    assert parsed.network_endpoint_groups == {80: "k8s1-neg-80", 443: "k8s1-neg-443"}
    assert parsed.zones == ["us-central1-a", "us-central1-b"]


def test_schema_drops_unknown_keys(neg_status_payload: dict[str, object]) -> None:
    parsed = NegStatusPayload.model_validate({**neg_status_payload, "syncer_state": "ok"})

    assert "syncer_state" not in parsed.model_dump()


def test_schema_rejects_scalar_zones() -> None:
    with pytest.raises(ValidationError):
        NegStatusPayload.model_validate({"zones": "us-central1-a"})


def test_translator_round_trip(neg_status_payload: dict[str, object]) -> None:
    status = to_domain(NegStatusPayload.model_validate(neg_status_payload))

    assert isinstance(status, NegStatus)
    assert status.zones == ("us-central1-a", "us-central1-b")
    assert to_domain(to_payload(status)) == status
