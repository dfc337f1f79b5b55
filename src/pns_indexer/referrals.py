from decimal import Decimal

from dipdup.models.evm import EvmEventData

from pns_indexer import models as models
from pns_indexer.codec import normalize_address
from pns_indexer.events import emit


async def get_referrer(address: str) -> models.Referrer:
    referrer, _ = await models.Referrer.get_or_create(
        id=normalize_address(address),
        defaults={
            'count': 0,
            'commission': Decimal(0),
        },
    )
    return referrer


async def receive_fee(address: str, amount: int, data: EvmEventData) -> models.Referrer:
    referrer = await get_referrer(address)
    referrer.count += 1
    if amount:
        referrer.commission += Decimal(amount)
    await referrer.save()

    await emit(
        models.ReferralFeeReceived,
        data,
        referrer=referrer.id,
        amount=Decimal(amount),
    )
    return referrer
