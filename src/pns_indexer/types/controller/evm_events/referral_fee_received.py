# generated by datamodel-codegen:
#   filename:  referral_fee_received.json

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class ReferralFeeReceivedPayload(BaseModel):
    model_config = ConfigDict(
        extra='forbid',
    )
    referrer: str
    amount: int
