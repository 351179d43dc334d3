"""Application orchestration entry points."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from negsync.adapters.neg_status import parse_neg_status
from negsync.domain.reconcile import NegDelta, compute_delta

if TYPE_CHECKING:
    from collections.abc import Mapping

    from negsync.domain.status import NegStatus


log = getLogger(__name__)


def describe_neg_status(status_text: str) -> NegStatus:
    """Decode a NEG status annotation value and log what it records."""

    status = parse_neg_status(status_text)
    log.info(
        "NEG status: ports=%s, zones=%s",
        sorted(status.network_endpoint_groups),
        list(status.zones),
    )
    return status


def plan_neg_sync(desired: Mapping[int, str], status_text: str) -> NegDelta:
    """Compute the NEGs to create and delete given the Service's current status annotation.

    Decode errors propagate unchanged.
    """

    observed = parse_neg_status(status_text).network_endpoint_groups
    delta = compute_delta(desired, observed)
    if delta.is_empty:
        log.info("NEGs in sync: %s ports", len(observed))
    else:
        log.info(
            "NEG delta: add=%s, remove=%s",
            dict(delta.to_add),
            dict(delta.to_remove),
        )
    return delta
