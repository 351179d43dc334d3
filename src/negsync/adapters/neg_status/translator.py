"""Translate NEG status payloads to and from domain records."""

from __future__ import annotations

from negsync.domain.port_names import PortNameMap
from negsync.domain.status import NegStatus

from .schema import NegStatusPayload


def to_domain(payload: NegStatusPayload) -> NegStatus:
    return NegStatus(
        network_endpoint_groups=PortNameMap(payload.network_endpoint_groups),
        zones=tuple(payload.zones),
    )


def to_payload(status: NegStatus) -> NegStatusPayload:
    groups = status.network_endpoint_groups
    return NegStatusPayload(
        network_endpoint_groups={port: groups[port] for port in sorted(groups)},
        zones=list(status.zones),
    )
