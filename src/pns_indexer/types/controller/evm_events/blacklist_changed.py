# generated by datamodel-codegen:
#   filename:  blacklist_changed.json

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class BlacklistChangedPayload(BaseModel):
    model_config = ConfigDict(
        extra='forbid',
    )
    account: str
    banned: bool
