import logging
from typing import Any
from typing import TypeVar

from dipdup.models import Model
from dipdup.models.evm import EvmEventData

from pns_indexer.codec import create_event_id

_logger = logging.getLogger(__name__)

EventT = TypeVar('EventT', bound=Model)


async def emit(model: type[EventT], data: EvmEventData, **values: Any) -> EventT:
    """Append an audit record for the event; replays of the same log are no-ops"""
    event_id = create_event_id(data)
    record, created = await model.get_or_create(
        id=event_id,
        defaults={
            'block_number': data.level,
            'transaction_id': data.transaction_hash,
            **values,
        },
    )
    if not created:
        _logger.debug('%s `%s` is already stored, skipping', model.__name__, event_id)
    return record
