"""
Abstract base classes defining the contract access capabilities.

The invoice client never owns a chain connection. It is handed:

- a ContractReader for read-only smart queries, and/or
- a WalletSession holding the connected address and a ContractSigner
  able to submit transactions on that address's behalf.

Implementations:
- DemoContract: In-memory contract for development and testing
- LcdQueryClient: Read-only queries over the Cosmos LCD REST API
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Mapping, Sequence


class ContractReader(ABC):
    """Read-only access to a CosmWasm contract."""

    @abstractmethod
    async def query_contract_smart(
        self, contract_address: str, query: Mapping[str, Any]
    ) -> Any:
        """
        Run a smart query against a contract.

        Args:
            contract_address: Address of the contract.
            query: The query message.

        Returns:
            The decoded JSON response of the contract.
        """


class ContractSigner(ContractReader):
    """Read and execute access on behalf of a connected address."""

    @abstractmethod
    async def execute(
        self,
        sender_address: str,
        contract_address: str,
        message: Mapping[str, Any],
        fee: Mapping[str, Any] | str,
        memo: str = "",
        funds: Sequence[Mapping[str, str]] = (),
    ) -> Mapping[str, Any]:
        """
        Sign and broadcast an execute message.

        Args:
            sender_address: Address signing the transaction.
            contract_address: Address of the contract.
            message: The execute message.
            fee: A StdFee mapping or "auto" for simulated gas.
            memo: Transaction memo.
            funds: Coins sent along with the message.

        Returns:
            The transaction result, including its event logs.
        """


@dataclass(frozen=True)
class WalletSession:
    """
    What the wallet provider hands to the client: an address and a signer.

    Either may be missing while the wallet is disconnected.
    """

    address: str | None = None
    signer: ContractSigner | None = None

    @property
    def connected(self) -> bool:
        return bool(self.address) and self.signer is not None
