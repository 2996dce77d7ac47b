"""Prometheus metrics for the backend."""

from prometheus_client import Counter, Summary

cep_lookup_duration = Summary(
    "cep_lookup_duration_seconds",
    "Tempo gasto em consultas de CEP ao ViaCEP",
)

cep_lookups = Counter(
    "cep_lookups_total",
    "Consultas de CEP por resultado (found, not_found, error)",
    ["status"],
)
