"""Conversions between registrar token ids, label hashes and entity keys.

Registrar tokens are identified by `uint256(keccak(label))`, so the 32-byte
big-endian form of a token id is the label hash itself. Entity keys are
`0x`-prefixed lower-case hex strings, the same form `EvmEventData` uses for
hashes.
"""

from dipdup.models.evm import EvmEventData
from eth_utils.address import to_normalized_address
from eth_utils.crypto import keccak
from eth_utils.hexadecimal import decode_hex
from eth_utils.hexadecimal import encode_hex

LABEL_SIZE = 32
EMPTY_NODE = b'\x00' * LABEL_SIZE


def label_from_id(token_id: int) -> bytes:
    """Encode numeric token id as a 32-byte label hash"""
    if not 0 <= token_id < 2**256:
        raise ValueError(f'Token id is not a valid uint256: {token_id}')
    return token_id.to_bytes(LABEL_SIZE, 'big')


def label_to_bytes(label: bytes | str) -> bytes:
    """Normalize a label coming from a decoded payload to raw bytes"""
    raw = decode_hex(label) if isinstance(label, str) else bytes(label)
    if len(raw) != LABEL_SIZE:
        raise ValueError(f'Label must be {LABEL_SIZE} bytes long, got {len(raw)}')
    return raw


def label_key(label: bytes) -> str:
    return encode_hex(label)


def domain_key(root_node: bytes, label: bytes) -> str:
    """Key of the domain `label` directly under `root_node`"""
    return encode_hex(keccak(root_node + label))


def namehash(name: str) -> bytes:
    node = EMPTY_NODE
    if not name:
        return node
    for part in reversed(name.split('.')):
        node = keccak(node + keccak(text=part))
    return node


def labelhash(name: str) -> bytes:
    return keccak(text=name)


def normalize_address(address: str) -> str:
    return to_normalized_address(address)


def create_event_id(data: EvmEventData) -> str:
    """Stable identifier of a single log within chain history"""
    return f'{data.transaction_hash}-{data.log_index}'
