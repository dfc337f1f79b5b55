from dipdup.context import HandlerContext
from dipdup.models.evm import EvmEvent

from pns_indexer import referrals
from pns_indexer.types.controller.evm_events.referral_fee_received import ReferralFeeReceivedPayload


async def on_referral_fee_received(
    ctx: HandlerContext,
    event: EvmEvent[ReferralFeeReceivedPayload],
) -> None:
    await referrals.receive_fee(
        address=event.payload.referrer,
        amount=event.payload.amount,
        data=event.data,
    )
