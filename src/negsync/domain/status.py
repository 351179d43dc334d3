"""NEG status record stored on a Service annotation."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Final

from .port_names import PortNameMap

NEG_STATUS_ANNOTATION_KEY: Final[str] = "cloud.google.com/neg-status"


@dataclass(frozen=True, slots=True, kw_only=True)
class NegStatus:
    """Endpoint groups by service port plus the zones they span.

    ``NegStatus()`` is the zero value. It is also what a failed decode yields, so
    callers gate on the decode error, not on ``is_empty``.
    """

    network_endpoint_groups: PortNameMap = field(default_factory=PortNameMap)
    zones: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        groups: Mapping[int, str] = self.network_endpoint_groups
        if not isinstance(groups, PortNameMap):
            object.__setattr__(self, "network_endpoint_groups", PortNameMap(groups))
        zones: Iterable[str] = self.zones
        if not isinstance(zones, tuple):
            object.__setattr__(self, "zones", tuple(zones))

    @property
    def is_empty(self) -> bool:
        return not self.network_endpoint_groups and not self.zones
