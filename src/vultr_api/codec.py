# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Serializer and envelope codec.

Encodes request bodies and query options to the wire format and decodes
response bodies into the envelope model declared by the calling handler.
The codec never guesses a shape: whatever class the handler passes is the
shape that is validated.
"""

import json
import logging
from collections.abc import Mapping
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from .exceptions import APIError, DecodeError

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)

JSON_CONTENT_TYPE = "application/json"


def encode(value: Any) -> bytes:
    """
    Encode a request body as JSON bytes.

    Pydantic models are dumped with ``exclude_unset=True`` so that only
    explicitly assigned fields are sent. An assigned ``None`` is sent as
    ``null``; an assigned empty value is sent as is. Plain mappings and
    sequences are encoded unchanged.

    Args:
        value: A pydantic model, or any JSON-serializable value

    Returns:
        UTF-8 encoded JSON

    Raises:
        TypeError: If the value is not JSON-serializable
    """
    if isinstance(value, BaseModel):
        return value.model_dump_json(exclude_unset=True, by_alias=True).encode("utf-8")
    if isinstance(value, (bytes, bytearray)):
        return bytes(value)
    return json.dumps(_to_jsonable(value), separators=(",", ":")).encode("utf-8")


def _to_jsonable(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json", exclude_unset=True, by_alias=True)
    if isinstance(value, Mapping):
        return {str(k): _to_jsonable(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_to_jsonable(v) for v in value]
    return value


def encode_query(options: BaseModel | Mapping[str, Any] | None) -> dict[str, str]:
    """
    Encode list/filter options as query parameters.

    Unset, ``None`` and empty-string values are dropped. Booleans become
    ``true``/``false`` and sequences are joined with commas.
    """
    if options is None:
        return {}
    if isinstance(options, BaseModel):
        raw = options.model_dump(mode="json", exclude_unset=True, by_alias=True)
    else:
        raw = dict(options)

    params: dict[str, str] = {}
    for key, value in raw.items():
        if value is None or value == "":
            continue
        if isinstance(value, bool):
            params[key] = "true" if value else "false"
        elif isinstance(value, (list, tuple)):
            if value:
                params[key] = ",".join(str(v) for v in value)
        else:
            params[key] = str(value)
    return params


def decode(
    content: bytes,
    shape: type[ModelT] | None,
    status_code: int | None = None,
) -> ModelT | None:
    """
    Decode a successful response body into ``shape``.

    Args:
        content: Raw response body (may be empty)
        shape: Envelope model declared by the handler, or None when the
            endpoint returns no payload
        status_code: HTTP status, recorded on DecodeError

    Returns:
        The validated envelope, or None when ``shape`` is None

    Raises:
        DecodeError: If the body is empty, not JSON, or lacks a required key
    """
    if shape is None:
        if content.strip():
            logger.debug(f"Ignoring {len(content)} byte body: no envelope declared")
        return None

    if not content.strip():
        raise DecodeError(
            f"empty response body, expected {shape.__name__}",
            status_code=status_code,
            body=content,
        )

    try:
        return shape.model_validate_json(content)
    except ValidationError as e:
        raise DecodeError(
            f"response does not match {shape.__name__}: {e.error_count()} error(s): "
            f"{_summarize(e)}",
            status_code=status_code,
            body=content,
        ) from e


def _summarize(error: ValidationError) -> str:
    parts = []
    for item in error.errors()[:3]:
        loc = ".".join(str(p) for p in item["loc"]) or "<root>"
        parts.append(f"{loc}: {item['msg']}")
    return "; ".join(parts)


def decode_error(content: bytes, status_code: int, reason: str = "") -> APIError:
    """
    Build an APIError from a non-2xx response.

    The API reports failures as ``{"error": "...", "status": 404}``. Some
    gateways answer with ``{"message": "..."}`` or a non-JSON page, in which
    case the HTTP reason phrase is used.
    """
    message = ""
    provider_code: str | None = None

    if content.strip():
        try:
            payload = json.loads(content)
        except ValueError:
            payload = None
        if isinstance(payload, dict):
            raw_message = payload.get("error") or payload.get("message")
            if isinstance(raw_message, dict):
                provider_code = _as_code(raw_message.get("code"))
                raw_message = raw_message.get("message")
            if isinstance(raw_message, str):
                message = raw_message
            if provider_code is None:
                provider_code = _as_code(payload.get("code"))

    if not message:
        message = reason or f"HTTP {status_code}"

    return APIError(status_code, message, provider_code=provider_code)


def _as_code(value: Any) -> str | None:
    if value is None or value == "":
        return None
    return str(value)


__all__ = [
    "JSON_CONTENT_TYPE",
    "decode",
    "decode_error",
    "encode",
    "encode_query",
]
