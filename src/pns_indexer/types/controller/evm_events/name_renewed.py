# generated by datamodel-codegen:
#   filename:  name_renewed.json

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class NameRenewedPayload(BaseModel):
    model_config = ConfigDict(
        extra='forbid',
    )
    name: str
    label: bytes
    cost: int
    expires: int
