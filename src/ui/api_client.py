"""
HTTP client for the colaboradores endpoints, used by the UI views
"""

import logging
from typing import Dict, Any, List, Optional

import httpx

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "http://localhost:3000/api"


class ColaboradoresClient:
    """Thin async wrapper over /api/colaboradores; non-2xx responses raise httpx.HTTPStatusError"""

    def __init__(self, base_url: str = DEFAULT_BASE_URL, client: Optional[httpx.AsyncClient] = None):
        self.base_url = base_url.rstrip("/")
        self._client = client or httpx.AsyncClient()
        self._owns_client = client is None

    def _url(self, colaborador_id: Optional[int] = None) -> str:
        url = f"{self.base_url}/colaboradores"
        if colaborador_id is not None:
            url = f"{url}/{colaborador_id}"
        return url

    async def _send(self, method: str, url: str, payload: Optional[Dict[str, Any]] = None) -> Any:
        response = await self._client.request(method, url, json=payload)
        response.raise_for_status()
        return response.json()

    async def list_all(self) -> List[Dict[str, Any]]:
        return await self._send("GET", self._url())

    async def create(self, colaborador: Dict[str, Any]) -> Dict[str, Any]:
        logger.info(f"Creating colaborador {colaborador.get('nome')!r}")
        return await self._send("POST", self._url(), _payload(colaborador))

    async def update(self, colaborador_id: int, colaborador: Dict[str, Any]) -> Dict[str, Any]:
        logger.info(f"Updating colaborador {colaborador_id}")
        return await self._send("PUT", self._url(colaborador_id), _payload(colaborador))

    async def delete(self, colaborador_id: int) -> Dict[str, Any]:
        logger.info(f"Deleting colaborador {colaborador_id}")
        return await self._send("DELETE", self._url(colaborador_id))

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()


def _payload(colaborador: Dict[str, Any]) -> Dict[str, Any]:
    return {key: value for key, value in colaborador.items() if key != "id"}
