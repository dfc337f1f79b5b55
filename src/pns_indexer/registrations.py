"""Registration lifecycle driven by the base registrar.

`Domain.expiry_date` always includes the grace period so consumers can
compare it with the current time directly. `Registration.expiry_date` keeps
the value reported by the contract.
"""

import logging

from dipdup.models.evm import EvmEventData

from pns_indexer import models as models
from pns_indexer.codec import domain_key
from pns_indexer.codec import label_from_id
from pns_indexer.codec import label_key
from pns_indexer.codec import normalize_address
from pns_indexer.events import emit
from pns_indexer.exceptions import MissingEntityError
from pns_indexer.labels import is_valid_label
from pns_indexer.labels import name_by_hash
from pns_indexer.registrar import RegistrarSettings

_logger = logging.getLogger(__name__)


async def get_domain(settings: RegistrarSettings, label: bytes, event: str) -> models.Domain:
    key = domain_key(settings.root_node, label)
    domain = await models.Domain.get_or_none(id=key)
    if domain is None:
        raise MissingEntityError('Domain', key, event)
    return domain


async def get_account(address: str) -> models.Account:
    account, _ = await models.Account.get_or_create(id=normalize_address(address))
    return account


async def register(
    settings: RegistrarSettings,
    owner: str,
    token_id: int,
    expires: int,
    data: EvmEventData,
) -> models.Registration:
    label = label_from_id(token_id)
    domain = await get_domain(settings, label, 'NameRegistered')
    account = await get_account(owner)

    registration = await models.Registration.get_or_none(id=label_key(label))
    if registration is None:
        registration = models.Registration(id=label_key(label))
    registration.domain = domain
    registration.registration_date = data.timestamp
    registration.expiry_date = expires
    registration.registrant = account

    domain.registrant = account
    domain.expiry_date = expires + settings.grace_period

    label_name = await name_by_hash(label)
    if is_valid_label(label_name):
        domain.label_name = label_name
        domain.name = settings.full_name(label_name)
        registration.label_name = label_name

    await domain.save()
    await registration.save()

    await emit(
        models.NameRegistered,
        data,
        registration=registration.id,
        registrant=account.id,
        expiry_date=expires,
    )
    return registration


async def renew(
    settings: RegistrarSettings,
    token_id: int,
    expires: int,
    data: EvmEventData,
) -> models.Registration:
    label = label_from_id(token_id)
    registration = await models.Registration.get_or_none(id=label_key(label))
    if registration is None:
        raise MissingEntityError('Registration', label_key(label), 'NameRenewed')
    domain = await get_domain(settings, label, 'NameRenewed')

    registration.expiry_date = expires
    domain.expiry_date = expires + settings.grace_period

    await registration.save()
    await domain.save()

    await emit(
        models.NameRenewed,
        data,
        registration=registration.id,
        expiry_date=expires,
    )
    return registration


async def transfer(
    settings: RegistrarSettings,
    to: str,
    token_id: int,
    data: EvmEventData,
) -> bool:
    """Move registration to a new owner, return False if the token was never registered"""
    account = await get_account(to)
    label = label_from_id(token_id)

    registration = await models.Registration.get_or_none(id=label_key(label))
    if registration is None:
        _logger.debug('Registration %s is not indexed, skipping transfer', label_key(label))
        return False
    domain = await get_domain(settings, label, 'Transfer')

    registration.registrant = account
    domain.registrant = account

    await domain.save()
    await registration.save()

    await emit(
        models.NameTransferred,
        data,
        registration=registration.id,
        new_owner=account.id,
    )
    return True
