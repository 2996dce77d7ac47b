from .viacep_client import (
    LookupOutcome,
    LookupStatus,
    ViaCEPClient,
    ViaCEPClientConfig,
    fetch_address_by_cep,
)

__all__ = (
    "LookupOutcome",
    "LookupStatus",
    "ViaCEPClient",
    "ViaCEPClientConfig",
    "fetch_address_by_cep",
)
