from dipdup.context import HandlerContext
from dipdup.models.evm import EvmEvent

from pns_indexer import registrations
from pns_indexer.registrar import REGISTRAR
from pns_indexer.types.base_registrar.evm_events.transfer import TransferPayload


async def on_transfer(
    ctx: HandlerContext,
    event: EvmEvent[TransferPayload],
) -> None:
    transferred = await registrations.transfer(
        settings=REGISTRAR,
        to=event.payload.to,
        token_id=event.payload.tokenId,
        data=event.data,
    )
    if not transferred:
        ctx.logger.debug('Skipping transfer of unregistered token %s', event.payload.tokenId)
