# generated by datamodel-codegen:
#   filename:  new_owner.json

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class NewOwnerPayload(BaseModel):
    model_config = ConfigDict(
        extra='forbid',
    )
    node: bytes
    label: bytes
    owner: str
