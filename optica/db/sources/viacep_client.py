"""Client for the ViaCEP postal-code lookup service."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional

import requests
from pydantic import ValidationError

from optica.common.masks import MaskKind, only_digits
from optica.db.schemas import AddressPayload

logger = logging.getLogger(__name__)

CEP_LENGTH = MaskKind.CEP.max_digits


@dataclass
class ViaCEPClientConfig:
    """Holds configuration for the ViaCEP client."""

    base_url: str = "https://viacep.com.br/ws"
    timeout: int = 10


class LookupStatus(str, Enum):
    FOUND = "found"
    NOT_FOUND = "not_found"
    ERROR = "error"


@dataclass(frozen=True)
class LookupOutcome:
    status: LookupStatus
    address: Optional[AddressPayload] = None
    detail: Optional[str] = None

    @property
    def found(self) -> bool:
        return self.status is LookupStatus.FOUND

    def as_record(self) -> Optional[Dict[str, Any]]:
        if self.address is None:
            return None
        return self.address.as_record()


def _reports_missing(payload: Dict[str, Any]) -> bool:
    flag = payload.get("erro", False)
    if isinstance(flag, str):
        return flag.strip().lower() == "true"
    return bool(flag)


class ViaCEPClient:
    """One request per lookup: no retries, no caching, no deduplication."""

    def __init__(
        self,
        config: Optional[ViaCEPClientConfig] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.config = config or ViaCEPClientConfig()
        self.session = session or requests.Session()

    def build_url(self, digits: str) -> str:
        return f"{self.config.base_url.rstrip('/')}/{digits}/json/"

    def _get(self, digits: str) -> Any:
        response = self.session.get(self.build_url(digits), timeout=self.config.timeout)
        response.raise_for_status()
        return response.json()

    def lookup(self, cep: str) -> LookupOutcome:
        """Resolve ``cep`` telling apart "unknown CEP" from "service unavailable".

        Never raises: malformed codes short-circuit to ``NOT_FOUND`` without any
        request, and transport/parsing failures come back as ``ERROR``.
        """
        digits = only_digits(cep)
        if len(digits) != CEP_LENGTH:
            return LookupOutcome(LookupStatus.NOT_FOUND, detail="CEP must have 8 digits")

        try:
            payload = self._get(digits)
        except Exception as exc:
            logger.warning("ViaCEP request for %s failed: %s", digits, exc)
            return LookupOutcome(LookupStatus.ERROR, detail=str(exc))

        if not isinstance(payload, dict):
            logger.warning("Unexpected ViaCEP payload for %s: %r", digits, payload)
            return LookupOutcome(LookupStatus.ERROR, detail="unexpected payload format")

        if _reports_missing(payload):
            logger.debug("ViaCEP has no address for %s", digits)
            return LookupOutcome(LookupStatus.NOT_FOUND, detail="CEP not found")

        try:
            address = AddressPayload.model_validate(payload)
        except ValidationError as exc:
            logger.warning("Invalid ViaCEP payload for %s: %s", digits, exc)
            return LookupOutcome(LookupStatus.ERROR, detail="invalid payload")

        return LookupOutcome(LookupStatus.FOUND, address=address)

    def fetch_address(self, cep: str) -> Optional[Dict[str, Any]]:
        """Address record or ``None`` for every kind of miss."""
        return self.lookup(cep).as_record()


def fetch_address_by_cep(
    cep: str,
    client: Optional[ViaCEPClient] = None,
) -> Optional[Dict[str, Any]]:
    return (client or ViaCEPClient()).fetch_address(cep)
