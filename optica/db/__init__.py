"""DB package exposing public helpers."""

from .dataframes import build_customers_df
from .migrations import PURCHASE_ORDER_MIGRATIONS, ColumnMigration, apply_migrations, ensure_column
from .schemas import AddressPayload
from .sources import LookupOutcome, LookupStatus, ViaCEPClient, ViaCEPClientConfig, fetch_address_by_cep

__all__ = (
    "build_customers_df",
    "PURCHASE_ORDER_MIGRATIONS",
    "ColumnMigration",
    "apply_migrations",
    "ensure_column",
    "AddressPayload",
    "LookupOutcome",
    "LookupStatus",
    "ViaCEPClient",
    "ViaCEPClientConfig",
    "fetch_address_by_cep",
)
