from __future__ import annotations

import pytest

from negsync.domain.port_names import PortNameMap
from negsync.domain.reconcile import NegDelta, apply_delta, compute_delta


def test_compute_delta_when_in_sync() -> None:
    ports = {80: "neg-http", 443: "neg-https"}

    delta = compute_delta(ports, ports)

    assert delta.is_empty
    assert delta == NegDelta(to_add=PortNameMap(), to_remove=PortNameMap())


def test_compute_delta_adds_missing_and_removes_stale() -> None:
    desired = {80: "neg-http", 443: "neg-https"}
    observed = {80: "neg-http", 8080: "neg-legacy"}

    delta = compute_delta(desired, observed)

    assert delta.to_add == {443: "neg-https"}
    assert delta.to_remove == {8080: "neg-legacy"}
    assert not delta.is_empty


def test_compute_delta_renamed_port_is_both_added_and_removed() -> None:
    delta = compute_delta({80: "neg-new"}, {80: "neg-old"})

    assert delta.to_add == {80: "neg-new"}
    assert delta.to_remove == {80: "neg-old"}


def test_compute_delta_from_nothing_observed() -> None:
    delta = compute_delta({80: "neg-http"}, {})

    assert delta.to_add == {80: "neg-http"}
    assert delta.to_remove == {}


@pytest.mark.parametrize(
    ("desired", "observed"),
    [
        pytest.param({}, {}, id="both-empty"),
        pytest.param({80: "a"}, {}, id="create-all"),
        pytest.param({}, {80: "a", 443: "b"}, id="delete-all"),
        pytest.param({80: "a", 443: "b"}, {80: "z", 8080: "c"}, id="mixed"),
    ],
)
def test_apply_delta_reaches_desired_state(
    desired: dict[int, str], observed: dict[int, str]
) -> None:
    delta = compute_delta(desired, observed)

    assert apply_delta(observed, delta) == desired


def test_delta_is_hashable_value() -> None:
    first = compute_delta({80: "a"}, {443: "b"})
    second = compute_delta({80: "a"}, {443: "b"})

    assert first == second
    assert hash(first) == hash(second)
