from dipdup.models.evm import EvmEventData

from pns_indexer import models as models
from pns_indexer.codec import normalize_address
from pns_indexer.events import emit


async def change(address: str, banned: bool, data: EvmEventData) -> models.Blacklist:
    # NOTE: Only the latest flag is kept here; history lives in `BlacklistChanged` records
    entry, _ = await models.Blacklist.get_or_create(id=normalize_address(address))
    entry.banned = banned
    await entry.save()

    await emit(
        models.BlacklistChanged,
        data,
        account=entry.id,
        banned=banned,
    )
    return entry
