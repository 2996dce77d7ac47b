"""Domain service wrapping postal-code lookups with metrics and logging."""

from __future__ import annotations

import logging
from typing import Optional

from optica.backend import metrics
from optica.common.settings import Settings, get_settings
from optica.db.sources.viacep_client import (
    LookupOutcome,
    LookupStatus,
    ViaCEPClient,
    ViaCEPClientConfig,
)

logger = logging.getLogger(__name__)


class AddressService:
    def __init__(
        self,
        client: Optional[ViaCEPClient] = None,
        settings: Optional[Settings] = None,
    ) -> None:
        self.settings = settings or get_settings()
        self.client = client or ViaCEPClient(
            config=ViaCEPClientConfig(
                base_url=self.settings.viacep_base_url,
                timeout=self.settings.viacep_timeout,
            ),
        )

    def lookup_address(self, cep: str) -> LookupOutcome:
        with metrics.cep_lookup_duration.time():
            outcome = self.client.lookup(cep)
        metrics.cep_lookups.labels(status=outcome.status.value).inc()
        if outcome.status is LookupStatus.ERROR:
            logger.error("CEP lookup unavailable for %r: %s", cep, outcome.detail)
        else:
            logger.info("CEP lookup for %r: %s", cep, outcome.status.value)
        return outcome
