"""Decode and encode NEG status annotations.

Decoding runs in two steps: ``json.loads`` for syntax, then the pydantic
payload model for shape. Each step reports its own failure kind so that a
malformed annotation can be traced back to the offending character or field.
"""

from __future__ import annotations

import json
from enum import StrEnum
from logging import getLogger

from pydantic import ValidationError

from negsync.domain.port_names import PortNameMap
from negsync.domain.status import NegStatus

from .schema import NegStatusPayload, PortNameMapPayload
from .translator import to_domain, to_payload

log = getLogger(__name__)

UNEXPECTED_END_MESSAGE = "unexpected end of JSON input"


class DecodeFailure(StrEnum):
    TRUNCATED = "truncated"
    SYNTAX = "syntax"
    SCHEMA = "schema"


class NegStatusDecodeError(ValueError):
    """Raised when an annotation is not a well-formed NEG status document.

    ``record`` is the zero-value status, handed back by the non-raising API.
    """

    def __init__(
        self,
        message: str,
        *,
        kind: DecodeFailure,
        line: int | None = None,
        column: int | None = None,
    ) -> None:
        super().__init__(message)
        self.kind = kind
        self.line = line
        self.column = column
        self.record = NegStatus()


def _from_json_error(exc: json.JSONDecodeError) -> NegStatusDecodeError:
    remainder = exc.doc[exc.pos :]
    if not remainder.strip() or exc.msg.startswith("Unterminated string"):
        return NegStatusDecodeError(
            UNEXPECTED_END_MESSAGE,
            kind=DecodeFailure.TRUNCATED,
            line=exc.lineno,
            column=exc.colno,
        )
    reason = exc.msg[:1].lower() + exc.msg[1:]
    return NegStatusDecodeError(
        f"invalid character {remainder[0]!r} at line {exc.lineno} column {exc.colno}: {reason}",
        kind=DecodeFailure.SYNTAX,
        line=exc.lineno,
        column=exc.colno,
    )


def _from_validation_error(exc: ValidationError) -> NegStatusDecodeError:
    errors = exc.errors()
    first = errors[0]
    location = ".".join(str(part) for part in first["loc"]) or "<root>"
    message = f"invalid value for {location}: {first['msg']}"
    if len(errors) > 1:
        message += f" (and {len(errors) - 1} more)"
    return NegStatusDecodeError(message, kind=DecodeFailure.SCHEMA)


def _load_json(text: str) -> object:
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise _from_json_error(exc) from exc
    except RecursionError as exc:
        raise NegStatusDecodeError(
            "exceeded max nesting depth",
            kind=DecodeFailure.SYNTAX,
        ) from exc


def parse_neg_status(text: str) -> NegStatus:
    """Decode a ``cloud.google.com/neg-status`` annotation value.

    Unknown fields are ignored and missing fields decode to empty values, so a
    document with only misnamed keys yields ``NegStatus()`` without error.

    Raises:
        NegStatusDecodeError: ``text`` is not JSON, is truncated, or holds a
            field of the wrong shape.
    """

    raw = _load_json(text)
    if raw is None:
        return NegStatus()
    try:
        payload = NegStatusPayload.model_validate(raw)
    except ValidationError as exc:
        raise _from_validation_error(exc) from exc

    status = to_domain(payload)
    log.debug(
        "Decoded NEG status: %s groups across %s zones",
        len(status.network_endpoint_groups),
        len(status.zones),
    )
    return status


def try_parse_neg_status(text: str) -> tuple[NegStatus, NegStatusDecodeError | None]:
    """Like ``parse_neg_status`` but returns ``(NegStatus(), error)`` on failure."""

    try:
        return parse_neg_status(text), None
    except NegStatusDecodeError as exc:
        return exc.record, exc


def encode_neg_status(status: NegStatus) -> str:
    return to_payload(status).model_dump_json()


def parse_port_name_map(text: str) -> PortNameMap:
    """Decode a JSON object of decimal port keys to names, e.g. ``{"80": "neg-a"}``."""

    raw = _load_json(text)
    if raw is None:
        return PortNameMap()
    try:
        return PortNameMap(PortNameMapPayload.validate_python(raw))
    except ValidationError as exc:
        raise _from_validation_error(exc) from exc


def encode_port_name_map(ports: PortNameMap) -> dict[str, str]:
    return {str(port): ports[port] for port in sorted(ports)}
