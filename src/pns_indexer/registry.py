import logging

from eth_utils.hexadecimal import encode_hex

from pns_indexer import models as models
from pns_indexer.codec import domain_key
from pns_indexer.codec import label_key
from pns_indexer.codec import label_to_bytes
from pns_indexer.labels import is_valid_label
from pns_indexer.labels import name_by_hash
from pns_indexer.registrar import RegistrarSettings
from pns_indexer.registrations import get_account

_logger = logging.getLogger(__name__)


async def new_owner(
    settings: RegistrarSettings,
    node: bytes | str,
    label: bytes | str,
    owner: str,
) -> models.Domain:
    """Create or update the domain `label` under `node` owned by `owner`"""
    parent = label_to_bytes(node)
    label_bytes = label_to_bytes(label)
    account = await get_account(owner)

    key = domain_key(parent, label_bytes)
    domain = await models.Domain.get_or_none(id=key)
    if domain is None:
        _logger.debug('Creating domain %s', key)
        domain = models.Domain(
            id=key,
            labelhash=label_key(label_bytes),
            parent=encode_hex(parent),
        )
    domain.owner = account

    if domain.label_name is None and parent == settings.root_node:
        label_name = await name_by_hash(label_bytes)
        if is_valid_label(label_name):
            domain.label_name = label_name
            domain.name = settings.full_name(label_name)

    await domain.save()
    return domain
