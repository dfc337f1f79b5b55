from dipdup.context import HandlerContext
from dipdup.models.evm import EvmEvent

from pns_indexer import registry
from pns_indexer.registrar import REGISTRAR
from pns_indexer.types.registry.evm_events.new_owner import NewOwnerPayload


async def on_new_owner(
    ctx: HandlerContext,
    event: EvmEvent[NewOwnerPayload],
) -> None:
    await registry.new_owner(
        settings=REGISTRAR,
        node=event.payload.node,
        label=event.payload.label,
        owner=event.payload.owner,
    )
