# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Base model for request bodies and response envelopes.

Every wire type in the library derives from VultrModel. Two behaviors matter:

* Unknown response fields are ignored, so new API fields never break decoding.
* Pydantic tracks which fields were explicitly assigned. The codec encodes only
  those, so a field has three distinct states on the wire:

  - never assigned: key omitted ("leave unchanged" on partial updates)
  - assigned an empty value ("", [], 0, False): sent as given
  - assigned None: sent as JSON null

Example:
    >>> req = DatabaseUpdateReq(label="")
    >>> encode(req)
    b'{"label":""}'
"""

from pydantic import BaseModel, ConfigDict


class VultrModel(BaseModel):
    """Base class for all API request and response models."""

    model_config = ConfigDict(
        extra="ignore",
        populate_by_name=True,
        validate_assignment=True,
    )


class MessageEnvelope(VultrModel):
    """Envelope returned by action endpoints: ``{"message": "..."}``."""

    message: str


__all__ = ["MessageEnvelope", "VultrModel"]
