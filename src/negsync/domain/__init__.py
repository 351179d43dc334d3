"""Domain types for NEG bookkeeping."""

from __future__ import annotations

from .port_names import PortNameMap, difference, union
from .reconcile import NegDelta, apply_delta, compute_delta
from .status import NEG_STATUS_ANNOTATION_KEY, NegStatus

__all__ = [
    "NEG_STATUS_ANNOTATION_KEY",
    "NegDelta",
    "NegStatus",
    "PortNameMap",
    "apply_delta",
    "compute_delta",
    "difference",
    "union",
]
