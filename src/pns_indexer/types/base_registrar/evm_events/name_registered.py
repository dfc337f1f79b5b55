# generated by datamodel-codegen:
#   filename:  name_registered.json

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class NameRegisteredPayload(BaseModel):
    model_config = ConfigDict(
        extra='forbid',
    )
    id: int
    owner: str
    expires: int
