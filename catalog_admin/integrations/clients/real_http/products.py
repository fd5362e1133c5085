"""
Real Products HTTP Client.

Purpose:
- Talks to the /products REST resource over HTTP (JSON bodies)
- Normalizes every response into ProductRecord via policy/response_wrappers

Error mapping:
- transport problems (connect, timeout, ...) -> FetchFailure
- non-2xx status                              -> HTTPStatusFailure, detail from
  the body's "error" field when present, else the reason phrase
- 2xx with unusable body                      -> ParseFailure

Important:
- This client is the ONLY place that makes product HTTP calls.
"""

from __future__ import annotations

import logging
import os
from typing import Any, Dict, List, Optional
from urllib.parse import quote

import httpx

from catalog_admin.errors import FetchFailure, HTTPStatusFailure, ParseFailure
from catalog_admin.integrations.contracts.interfaces import ProductRecord, ProductsClient
from catalog_admin.integrations.policy.response_wrappers import (
    normalize_product_list_response,
    normalize_product_response,
)

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "http://localhost:5000"


class RealProductsClient(ProductsClient):
    def __init__(
        self,
        base_url: Optional[str] = None,
        products_path: str = "/products",
        timeout_seconds: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> None:
        self.base_url = (base_url or os.getenv("CATALOG_API_URL", DEFAULT_BASE_URL)).rstrip("/")
        self.products_path = "/" + products_path.strip("/")
        self.timeout_seconds = timeout_seconds
        self.transport = transport
        self.headers = dict(headers or {})

    def _url(self, product_id: Optional[str] = None) -> str:
        url = f"{self.base_url}{self.products_path}"
        if product_id is not None:
            url = f"{url}/{quote(str(product_id), safe='')}"
        return url

    def _headers(self) -> Dict[str, str]:
        headers = {"Content-Type": "application/json", "Accept": "application/json"}
        headers.update(self.headers)
        return headers

    async def _request(self, method: str, url: str, payload: Optional[Dict[str, Any]] = None) -> httpx.Response:
        try:
            async with httpx.AsyncClient(timeout=self.timeout_seconds, transport=self.transport) as client:
                response = await client.request(method, url, json=payload, headers=self._headers())
        except httpx.HTTPError as exc:
            logger.error("%s %s failed before a response arrived: %s", method, url, exc)
            raise FetchFailure(f"{method} {url} failed: {exc}") from exc

        if not response.is_success:
            detail = _error_detail(response)
            logger.error("%s %s returned %s: %s", method, url, response.status_code, detail)
            raise HTTPStatusFailure(
                f"{method} {url} returned {response.status_code}: {detail}",
                status_code=response.status_code,
                payload=detail,
            )
        return response

    async def list_products(self) -> List[ProductRecord]:
        response = await self._request("GET", self._url())
        return normalize_product_list_response(_json_body(response))

    async def create_product(self, payload: Dict[str, Any]) -> ProductRecord:
        body = {k: v for k, v in payload.items() if k != "id"}
        response = await self._request("POST", self._url(), body)
        return normalize_product_response(_json_body(response))

    async def update_product(self, product_id: str, payload: Dict[str, Any]) -> ProductRecord:
        response = await self._request("PUT", self._url(product_id), payload)
        return normalize_product_response(_json_body(response))

    async def delete_product(self, product_id: str) -> None:
        await self._request("DELETE", self._url(product_id))


def _json_body(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError as exc:
        raise ParseFailure(f"Response from {response.request.url} is not valid JSON.", payload=response.text) from exc


def _error_detail(response: httpx.Response) -> str:
    try:
        data = response.json()
    except ValueError:
        data = None
    if isinstance(data, dict) and data.get("error"):
        return str(data["error"])
    return response.reason_phrase or f"HTTP {response.status_code}"
