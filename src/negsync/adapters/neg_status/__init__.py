"""Public interface for the NEG status annotation adapter."""

from __future__ import annotations

from .decoder import (
    DecodeFailure,
    NegStatusDecodeError,
    encode_neg_status,
    encode_port_name_map,
    parse_neg_status,
    parse_port_name_map,
    try_parse_neg_status,
)
from .schema import NegStatusPayload

__all__ = [
    "DecodeFailure",
    "NegStatusDecodeError",
    "NegStatusPayload",
    "encode_neg_status",
    "encode_port_name_map",
    "parse_neg_status",
    "parse_port_name_map",
    "try_parse_neg_status",
]
