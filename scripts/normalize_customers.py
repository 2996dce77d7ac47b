"""
Normalizar exportação de clientes (CPF, telefone, CEP) para o formato de exibição.
Entrada: data/customers/raw/customers.csv
Saída: data/customers/normalized/customers.csv
"""

from __future__ import annotations

import sys
from pathlib import Path

import pandas as pd

from optica.db.dataframes import build_customers_df

RAW_PATH = Path("data/customers/raw/customers.csv")
OUT_DIR = Path("data/customers/normalized")


def main(raw_path: Path = RAW_PATH) -> int:
    if not raw_path.exists():
        print(f"Arquivo não encontrado: {raw_path}")
        return 1

    raw = pd.read_csv(raw_path, dtype=str, keep_default_na=False)
    records = raw.replace({"": None}).to_dict(orient="records")
    df = build_customers_df(records)

    OUT_DIR.mkdir(parents=True, exist_ok=True)
    df.to_csv(OUT_DIR / "customers.csv", index=False)

    invalid = int((~df["cpf_valid"]).sum()) if not df.empty else 0
    print(f"{len(df)} clientes normalizados em {OUT_DIR}/ ({invalid} com CPF inválido)")
    return 0


if __name__ == "__main__":
    raise SystemExit(main(Path(sys.argv[1]) if len(sys.argv) > 1 else RAW_PATH))
