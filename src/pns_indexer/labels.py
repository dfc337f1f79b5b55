"""Human-readable names of registrar labels.

Labels are only known by hash on-chain. Plaintext names arrive either from
the registrar controller events or from a preimage list loaded into the
`Label` table, and are attached to domains and registrations only after
passing `is_valid_label`.
"""

import logging
from decimal import Decimal
from pathlib import Path
from typing import TypeGuard

from pns_indexer import models as models
from pns_indexer.codec import domain_key
from pns_indexer.codec import label_key
from pns_indexer.codec import labelhash
from pns_indexer.exceptions import MissingEntityError
from pns_indexer.registrar import RegistrarSettings

_logger = logging.getLogger(__name__)


def is_valid_label(name: str | None) -> TypeGuard[str]:
    # NOTE: Null bytes mark names the resolution service couldn't decode
    if name is None:
        return False
    return '\x00' not in name


async def name_by_hash(label: bytes) -> str | None:
    record = await models.Label.get_or_none(id=label_key(label))
    return record.name if record else None


async def remember_label(label: bytes, name: str) -> None:
    await models.Label.update_or_create(
        id=label_key(label),
        defaults={'name': name},
    )


async def seed_labels(path: Path) -> int:
    """Load newline-delimited names into the preimage table, return the number stored"""
    count = 0
    with path.open(encoding='utf-8') as file:
        for line in file:
            name = line.strip()
            if not name or not is_valid_label(name):
                continue
            await remember_label(labelhash(name), name)
            count += 1

    _logger.info('Loaded %s label preimages from `%s`', count, path)
    return count


async def reconcile_name(
    settings: RegistrarSettings,
    name: str,
    label: bytes,
    cost: int | Decimal,
    event: str,
) -> None:
    """Attach plaintext name observed by the controller to the domain and its registration"""
    if not is_valid_label(name):
        _logger.debug('Skipping invalid name for label %s', label_key(label))
        return

    key = domain_key(settings.root_node, label)
    domain = await models.Domain.get_or_none(id=key)
    if domain is None:
        raise MissingEntityError('Domain', key, event)

    if domain.label_name != name:
        domain.label_name = name
        domain.name = settings.full_name(name)
        await domain.save()

    registration = await models.Registration.get_or_none(id=label_key(label))
    if registration is None:
        _logger.debug('Registration %s is not indexed yet, skipping', label_key(label))
        return

    registration.label_name = name
    registration.cost = Decimal(cost)
    await registration.save()
