from dipdup.context import HandlerContext
from dipdup.models.evm import EvmEvent

from pns_indexer import registrations
from pns_indexer.registrar import REGISTRAR
from pns_indexer.types.base_registrar.evm_events.name_registered import NameRegisteredPayload


async def on_name_registered(
    ctx: HandlerContext,
    event: EvmEvent[NameRegisteredPayload],
) -> None:
    registration = await registrations.register(
        settings=REGISTRAR,
        owner=event.payload.owner,
        token_id=event.payload.id,
        expires=event.payload.expires,
        data=event.data,
    )
    ctx.logger.info('Registered `%s` until %s', registration.label_name or registration.id, registration.expiry_date)
