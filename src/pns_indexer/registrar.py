from dataclasses import dataclass
from dataclasses import field

from pns_indexer.codec import namehash

TLD = 'pls'
GRACE_PERIOD_SECONDS = 30 * 24 * 60 * 60


@dataclass(frozen=True)
class RegistrarSettings:
    """Constants of the registrar deployment

    :param tld: Top-level name all registrar labels live under
    :param grace_period: Seconds a name is held after its registration expires
    :param root_node: Namehash of `tld`
    """

    tld: str
    grace_period: int = GRACE_PERIOD_SECONDS
    root_node: bytes = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, 'root_node', namehash(self.tld))

    def full_name(self, label_name: str) -> str:
        return f'{label_name}.{self.tld}'


REGISTRAR = RegistrarSettings(tld=TLD)
