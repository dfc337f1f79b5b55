from dipdup.context import HandlerContext
from dipdup.models.evm import EvmEvent

from pns_indexer import labels
from pns_indexer.codec import label_to_bytes
from pns_indexer.registrar import REGISTRAR
from pns_indexer.types.controller.evm_events.name_registered import NameRegisteredPayload


async def on_controller_name_registered(
    ctx: HandlerContext,
    event: EvmEvent[NameRegisteredPayload],
) -> None:
    label = label_to_bytes(event.payload.label)
    if labels.is_valid_label(event.payload.name):
        await labels.remember_label(label, event.payload.name)

    await labels.reconcile_name(
        settings=REGISTRAR,
        name=event.payload.name,
        label=label,
        cost=event.payload.baseCost + event.payload.premium,
        event='NameRegistered',
    )
