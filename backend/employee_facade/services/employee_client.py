"""HTTP adapter for the upstream employee-record API.

Every failure (transport error, non-success status, malformed envelope,
missing record) is logged here and collapsed into an empty/absent result, so
callers only ever see ``[]``, ``None`` or ``DeleteOutcome.FAILED``.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any
from urllib.parse import quote

import aiohttp
from pydantic import TypeAdapter, ValidationError

from employee_facade.core.config import Settings
from employee_facade.models.employee import DeleteOutcome, Employee, EmployeeDraft

logger = logging.getLogger(__name__)

_EMPLOYEE_LIST = TypeAdapter(list[Employee])

_JSON_HEADERS = {"Content-Type": "application/json"}


class EmployeeApiClient:
    def __init__(self, base_url: str, session: aiohttp.ClientSession) -> None:
        self.base_url = base_url.rstrip("/")
        self.session = session

    @classmethod
    def from_settings(cls, settings: Settings) -> EmployeeApiClient:
        timeout = aiohttp.ClientTimeout(total=settings.UPSTREAM_TIMEOUT_SECONDS)
        # limit=0: no cap on concurrent upstream connections
        session = aiohttp.ClientSession(timeout=timeout, connector=aiohttp.TCPConnector(limit=0))
        logger.info("EmployeeApiClient initialized (base_url=%s)", settings.EMPLOYEE_API_BASE_URL)
        return cls(settings.EMPLOYEE_API_BASE_URL, session)

    async def close(self) -> None:
        if not self.session.closed:
            await self.session.close()

    def _employee_url(self, employee_id: str) -> str:
        return f"{self.base_url}/{quote(employee_id, safe='')}"

    async def fetch_all(self) -> list[Employee]:
        data = await self._request_data("GET", self.base_url)
        if data is None:
            return []
        try:
            return _EMPLOYEE_LIST.validate_python(data)
        except ValidationError as err:
            logger.warning("Could not decode employee list from upstream: %s", err)
            return []

    async def fetch_by_id(self, employee_id: str) -> Employee | None:
        data = await self._request_data("GET", self._employee_url(employee_id))
        if data is None:
            return None
        return self._decode_employee(data)

    async def create(self, draft: EmployeeDraft) -> Employee | None:
        data = await self._request_data(
            "POST",
            self.base_url,
            headers=_JSON_HEADERS,
            json=draft.to_payload(),
        )
        if data is None:
            return None
        return self._decode_employee(data)

    async def delete_by_id(self, employee_id: str) -> DeleteOutcome:
        url = self._employee_url(employee_id)
        try:
            async with self.session.request("DELETE", url) as response:
                logger.info("Upstream DELETE %s returned %s", url, response.status)
        except (aiohttp.ClientError, asyncio.TimeoutError) as err:
            logger.warning("Upstream DELETE %s failed: %r", url, err)
            return DeleteOutcome.FAILED
        return DeleteOutcome.DELETED

    async def check_connection(self) -> bool:
        try:
            async with self.session.request("GET", self.base_url) as response:
                return response.status == 200
        except Exception:
            logger.exception("Upstream employee API connection check failed")
            return False

    async def _request_data(self, method: str, url: str, **kwargs: Any) -> Any:
        """Send one request and return the envelope's ``data`` payload, or None."""
        try:
            async with self.session.request(method, url, **kwargs) as response:
                if not 200 <= response.status < 300:
                    error_text = await response.text()
                    logger.warning(
                        "Upstream %s %s returned %s: %s", method, url, response.status, error_text[:200]
                    )
                    return None
                body = await response.json(content_type=None)
        except (aiohttp.ClientError, asyncio.TimeoutError) as err:
            logger.warning("Upstream %s %s failed: %r", method, url, err)
            return None
        except ValueError as err:
            logger.warning("Upstream %s %s returned invalid JSON: %s", method, url, err)
            return None

        if not isinstance(body, dict) or "data" not in body:
            logger.warning("Upstream %s %s returned an unexpected envelope", method, url)
            return None
        return body["data"]

    def _decode_employee(self, data: Any) -> Employee | None:
        try:
            return Employee.model_validate(data)
        except ValidationError as err:
            logger.warning("Could not decode employee from upstream: %s", err)
            return None
