from typing import Any, Dict, List
from urllib.parse import quote
import logging

import httpx
from pydantic import TypeAdapter

from config import BACKEND_BASE_URL
from models.doctor import Doctor

# Configure logging
logger = logging.getLogger(__name__)

_DOCTOR_LIST = TypeAdapter(List[Doctor])


class CategoryNotFoundError(Exception):
    """Backend rejected the category with a 4xx status."""

    def __init__(self, category: str):
        super().__init__(category)
        self.category = category


class DoctorService:
    """Query the healthcare backend for doctors of a category."""

    @staticmethod
    def doctor_url(category: str, base_url: str = BACKEND_BASE_URL) -> str:
        """Append the category to the base URL as a single path segment."""
        return f"{base_url.rstrip('/')}/{quote(category, safe='')}"

    @staticmethod
    def parse_doctors(payload: Any) -> List[Doctor]:
        # strict: "7000.10" is not a fee, 7000 is
        return _DOCTOR_LIST.validate_python(payload, strict=True)

    @staticmethod
    async def fetch_by_category(category: str, base_url: str = BACKEND_BASE_URL) -> List[Dict[str, Any]]:
        """
        GET the doctors of a category.

        Returns the decoded backend array as-is once it validates as a
        list of Doctor. Raises CategoryNotFoundError for a 4xx answer.
        Anything else (transport errors, other non-2xx statuses, bad JSON,
        wrong shape) propagates unchanged.
        """
        url = DoctorService.doctor_url(category, base_url)
        async with httpx.AsyncClient() as client:
            response = await client.get(url)

        logger.debug("Backend response for %s: %s", url, response.status_code)
        if response.is_client_error:
            raise CategoryNotFoundError(category)
        response.raise_for_status()

        payload = response.json()
        DoctorService.parse_doctors(payload)
        return payload
