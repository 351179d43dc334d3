"""Desired vs observed NEG deltas."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from .port_names import PortNameMap

if TYPE_CHECKING:
    from collections.abc import Mapping


@dataclass(frozen=True, slots=True)
class NegDelta:
    """Pairs to create and pairs to delete to move observed state to desired state.

    A port whose NEG name changed shows up on both sides: the old pair in
    ``to_remove`` and the new pair in ``to_add``.
    """

    to_add: PortNameMap
    to_remove: PortNameMap

    @property
    def is_empty(self) -> bool:
        return not self.to_add and not self.to_remove


def compute_delta(desired: Mapping[int, str], observed: Mapping[int, str]) -> NegDelta:
    desired_map = PortNameMap(desired)
    observed_map = PortNameMap(observed)
    return NegDelta(
        to_add=desired_map.difference(observed_map),
        to_remove=observed_map.difference(desired_map),
    )


def apply_delta(observed: Mapping[int, str], delta: NegDelta) -> PortNameMap:
    """Return ``observed`` with ``delta`` applied; removals go first."""

    return PortNameMap(observed).difference(delta.to_remove).union(delta.to_add)
