from dipdup.context import HandlerContext
from dipdup.models.evm import EvmEvent

from pns_indexer import blacklist
from pns_indexer.types.controller.evm_events.blacklist_changed import BlacklistChangedPayload


async def on_blacklist_changed(
    ctx: HandlerContext,
    event: EvmEvent[BlacklistChangedPayload],
) -> None:
    entry = await blacklist.change(
        address=event.payload.account,
        banned=event.payload.banned,
        data=event.data,
    )
    ctx.logger.info('Account `%s` is %s', entry.id, 'banned' if entry.banned else 'allowed')
