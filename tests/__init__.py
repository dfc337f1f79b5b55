from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from dipdup import env
from dipdup.database import generate_schema
from dipdup.database import get_connection
from dipdup.database import tortoise_wrapper
from dipdup.models.evm import EvmEventData
from dipdup.transactions import TransactionManager

from pns_indexer import models as models
from pns_indexer.codec import domain_key
from pns_indexer.codec import label_from_id
from pns_indexer.registrar import REGISTRAR

env.set_test()


OWNER = '0xAbCdEf0123456789aBcDeF0123456789AbCdEf01'
OTHER = '0x1111111111111111111111111111111111111111'
ZERO = '0x0000000000000000000000000000000000000000'
TX_HASH = '0x' + 'ab' * 32


@asynccontextmanager
async def in_memory_db() -> AsyncIterator[None]:
    async with tortoise_wrapper('sqlite://:memory:', 'pns_indexer.models'), TransactionManager().register():
        await generate_schema(get_connection(), 'public')
        yield


def event_data(
    level: int = 100,
    timestamp: int = 1_690_000_000,
    transaction_hash: str = TX_HASH,
    log_index: int = 0,
    data: str = '0x',
    topics: tuple[str, ...] = (),
) -> EvmEventData:
    return EvmEventData.from_node_json(
        {
            'address': ZERO,
            'blockHash': '0x' + '00' * 32,
            'data': data,
            'blockNumber': hex(level),
            'logIndex': hex(log_index),
            'topics': topics,
            'transactionHash': transaction_hash,
            'transactionIndex': hex(0),
            'removed': False,
        },
        timestamp,
    )


async def create_domain(token_id: int) -> models.Domain:
    """Provision the domain registrar events expect to exist"""
    key = domain_key(REGISTRAR.root_node, label_from_id(token_id))
    return await models.Domain.create(id=key)
