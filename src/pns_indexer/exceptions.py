from dataclasses import dataclass

from dipdup.exceptions import Error


@dataclass(repr=False)
class MissingEntityError(Error):
    """Entity required to process an event is not indexed"""

    model: str
    pk: str
    event: str

    def _help(self) -> str:
        return f"""
            `{self.event}` event references {self.model} `{self.pk}` which doesn't exist.

            Domains are created by the registry `NewOwner` handler and registrations by
            the base registrar `NameRegistered` handler. Make sure that indexes start
            from the contract deployment level and that no events were skipped.
        """
