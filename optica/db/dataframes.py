"""Utilities to turn raw customer exports into normalized DataFrames."""

from __future__ import annotations

from typing import Iterable, Mapping

import pandas as pd

from optica.common.masks import format_cep, format_cpf, format_phone, is_valid_cpf

CUSTOMER_COLUMNS = {
    "id": "customer_id",
    "fullName": "full_name",
    "full_name": "full_name",
    "email": "email",
    "phone": "phone",
    "cpf": "cpf",
    "street": "street",
    "number": "number",
    "complement": "complement",
    "neighborhood": "neighborhood",
    "city": "city",
    "state": "state",
    "zipCode": "zip_code",
    "zip_code": "zip_code",
}

_MASKED_COLUMNS = {
    "cpf": format_cpf,
    "phone": format_phone,
    "zip_code": format_cep,
}


def _masked(series: pd.Series, formatter) -> pd.Series:
    return series.map(lambda value: formatter(str(value)) if pd.notna(value) else pd.NA)


def build_customers_df(payload: Iterable[Mapping]) -> pd.DataFrame:
    df = pd.DataFrame(payload)
    if df.empty:
        return df

    for source, target in CUSTOMER_COLUMNS.items():
        if source == target or source not in df.columns:
            continue
        if target in df.columns:
            # exports mix camelCase and snake_case keys
            df[target] = df[target].combine_first(df.pop(source))
        else:
            df = df.rename(columns={source: target})

    normalized_columns = list(dict.fromkeys(CUSTOMER_COLUMNS.values()))
    for column in normalized_columns:
        if column not in df.columns:
            df[column] = pd.NA

    for column, formatter in _MASKED_COLUMNS.items():
        df[column] = _masked(df[column], formatter)
    df["state"] = df["state"].map(lambda value: str(value).strip().upper() if pd.notna(value) else pd.NA)

    df["cpf_valid"] = df["cpf"].map(lambda value: bool(pd.notna(value) and is_valid_cpf(value)))
    return df[normalized_columns + ["cpf_valid"]]
