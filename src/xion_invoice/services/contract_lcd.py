"""
Read-only contract access over the Cosmos LCD REST API.

Smart queries are sent as

    GET {base_url}/cosmwasm/wasm/v1/contract/{address}/smart/{base64 query}

and answered with {"data": <contract JSON>}. No wallet is needed, which is
what lets invoices be viewed before a wallet is connected.
"""

from typing import Any, Mapping

import httpx

from xion_invoice.errors import UnexpectedResponseShape
from xion_invoice.lib import logs, objects
from xion_invoice.services.contract import ContractReader

LOG = logs.logger(__file__)

_SMART_QUERY_PATH = "/cosmwasm/wasm/v1/contract/{address}/smart/{query}"


class LcdQueryClient(ContractReader):
    """
    ContractReader backed by an LCD REST endpoint.

    Attributes:
        base_url: LCD endpoint URL.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float | None = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Initialize the client.

        Args:
            base_url: LCD endpoint URL.
            timeout: HTTP timeout in seconds.
            transport: Optional httpx transport, used to stub the network.
        """
        self.base_url = base_url.rstrip("/")
        self._http = httpx.AsyncClient(base_url=self.base_url, timeout=timeout, transport=transport)

    async def query_contract_smart(
        self, contract_address: str, query: Mapping[str, Any]
    ) -> Any:
        path = _SMART_QUERY_PATH.format(address=contract_address, query=objects.to_b64_json(query))
        LOG.debug("Smart query %s: %s", contract_address, objects.to_json(query))
        response = await self._http.get(path)
        response.raise_for_status()

        body = response.json()
        if not isinstance(body, dict) or "data" not in body:
            raise UnexpectedResponseShape(
                "Contract response could not be read.",
                detail=f"missing data field in {response.text[:200]}",
            )
        return body["data"]

    async def aclose(self) -> None:
        """Close the underlying HTTP connection pool."""
        await self._http.aclose()
