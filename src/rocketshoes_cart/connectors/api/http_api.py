
"""Adapters HTTP (httpx) para a API de estoque e produtos (layout json-server).

- GET /stock/:id    -> {"id", "amount"}
- GET /products/:id -> produto (objeto) ou lista com um produto
Toda falha (rede, timeout, status != 2xx, payload inválido) vira ServiceFailure.
"""
from __future__ import annotations
from typing import Any
import httpx
from kink import di
from pydantic import BaseModel, ValidationError
from ...core.settings import Settings
from ...core.logging import get_logger
from ...domain.errors import ProductNotFound, ServiceFailure
from ...ports.interfaces import Product, Stock

log = get_logger()

class _ApiClient:
    """Base comum: um httpx.AsyncClient por chamada, base_url/timeout das Settings."""
    def __init__(self, settings: Settings | None = None, transport: httpx.AsyncBaseTransport | None = None):
        self.settings = settings or di[Settings]
        self.transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self.settings.api_base_url,
            timeout=self.settings.http_timeout_s,
            transport=self.transport,
        )

    async def _get_json(self, path: str, product_id: int) -> Any:
        try:
            async with self._client() as cli:
                r = await cli.get(path)
        except httpx.HTTPError as e:
            log.warning("api_request_failed", path=path, error=str(e))
            raise ServiceFailure(f"GET {path}: {e}") from e
        if r.status_code == 404:
            raise ProductNotFound(product_id)
        if r.status_code // 100 != 2:
            log.warning("api_bad_status", path=path, status=r.status_code)
            raise ServiceFailure(f"GET {path}: HTTP {r.status_code}")
        try:
            return r.json()
        except ValueError as e:
            raise ServiceFailure(f"GET {path}: resposta não-JSON") from e

def _validate(schema: type[BaseModel], data: Any, path: str) -> Any:
    try:
        return schema.model_validate(data)
    except ValidationError as e:
        raise ServiceFailure(f"GET {path}: payload inválido") from e

class HttpStockService(_ApiClient):
    """Consulta de estoque; sem cache, cada operação consulta de novo."""
    async def get(self, product_id: int) -> Stock:
        path = f"/stock/{product_id}"
        return _validate(Stock, await self._get_json(path, product_id), path)

class HttpCatalogService(_ApiClient):
    async def get(self, product_id: int) -> Product:
        path = f"/products/{product_id}"
        data = await self._get_json(path, product_id)
        if isinstance(data, list):
            if not data:
                raise ProductNotFound(product_id)
            data = data[0]
        product = _validate(Product, data, path)
        if product.id != product_id:
            raise ServiceFailure(f"GET {path}: retornou produto {product.id}")
        return product
