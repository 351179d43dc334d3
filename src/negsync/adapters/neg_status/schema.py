"""Pydantic models describing the NEG status annotation payload."""

from __future__ import annotations

import re
from typing import Annotated, Final

from pydantic import BaseModel, BeforeValidator, ConfigDict, TypeAdapter, field_validator

_DECIMAL_PORT: Final[re.Pattern[str]] = re.compile(r"[+-]?[0-9]+")


def _null_to_empty_dict(value: object) -> object:
    return {} if value is None else value


def _null_to_empty_list(value: object) -> object:
    return [] if value is None else value


def _decimal_port_key(value: object) -> object:
    if isinstance(value, str) and not _DECIMAL_PORT.fullmatch(value):
        raise ValueError(f"port key must be a decimal integer, got {value!r}")
    return value


PortKey = Annotated[int, BeforeValidator(_decimal_port_key)]


class NegStatusBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)


class NegStatusPayload(NegStatusBaseModel):
    """Wire shape of ``cloud.google.com/neg-status``.

    Unknown keys are dropped and missing keys default to empty, so payloads
    written by newer controllers still decode.
    """

    network_endpoint_groups: dict[PortKey, str] = {}
    zones: list[str] = []

    _normalize_groups = field_validator("network_endpoint_groups", mode="before")(
        _null_to_empty_dict
    )
    _normalize_zones = field_validator("zones", mode="before")(_null_to_empty_list)


PortNameMapPayload = TypeAdapter(dict[PortKey, str])
