from dipdup.context import HandlerContext
from dipdup.models.evm import EvmEvent

from pns_indexer import registrations
from pns_indexer.registrar import REGISTRAR
from pns_indexer.types.base_registrar.evm_events.name_renewed import NameRenewedPayload


async def on_name_renewed(
    ctx: HandlerContext,
    event: EvmEvent[NameRenewedPayload],
) -> None:
    await registrations.renew(
        settings=REGISTRAR,
        token_id=event.payload.id,
        expires=event.payload.expires,
        data=event.data,
    )
