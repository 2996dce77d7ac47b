"""Command-line interface for masks, formatting, CEP lookups and migrations."""

from __future__ import annotations

import argparse
import json
from typing import Any, Optional

from optica.backend.app import configure_logging
from optica.backend.services.address_service import AddressService
from optica.common.exceptions import OpticaError
from optica.common.locale_format import format_currency, format_date, format_datetime
from optica.common.masks import MaskKind, apply_mask, only_digits, validate
from optica.db import migrations
from optica.db.sources.viacep_client import LookupStatus

MASK_CHOICES = sorted(kind.value for kind in MaskKind)


def _dump(data: Any, pretty: bool) -> str:
    return json.dumps(data, indent=2 if pretty else None, ensure_ascii=False)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Ferramentas de cadastro da ótica")
    parser.add_argument(
        "--pretty",
        action="store_true",
        help="Imprime JSON formatado",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    mask_parser = subparsers.add_parser("mask", help="Aplica máscara (CPF, telefone ou CEP)")
    mask_parser.add_argument("kind", choices=MASK_CHOICES)
    mask_parser.add_argument("value")

    validate_parser = subparsers.add_parser("validate", help="Valida CPF, telefone ou CEP")
    validate_parser.add_argument("kind", choices=MASK_CHOICES)
    validate_parser.add_argument("value")

    lookup_parser = subparsers.add_parser("lookup", help="Consulta endereço pelo CEP (ViaCEP)")
    lookup_parser.add_argument("cep")

    for name, help_text in (
        ("currency", "Formata valor em reais"),
        ("date", "Formata data (DD/MM/AAAA)"),
        ("datetime", "Formata data e hora (DD/MM/AAAA HH:MM)"),
    ):
        format_parser = subparsers.add_parser(name, help=help_text)
        format_parser.add_argument("value")

    subparsers.add_parser("migrate", help="Aplica migrações de colunas pendentes (DATABASE_URL)")

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging()

    if args.command == "mask":
        masked = apply_mask(MaskKind(args.kind), args.value)
        print(_dump({"masked": masked, "unmasked": only_digits(masked)}, args.pretty))
        return 0

    if args.command == "validate":
        valid = validate(MaskKind(args.kind), args.value)
        print(_dump({"kind": args.kind, "valid": valid}, args.pretty))
        return 0 if valid else 1

    if args.command == "lookup":
        outcome = AddressService().lookup_address(args.cep)
        if outcome.status is LookupStatus.FOUND:
            print(_dump(outcome.as_record(), args.pretty))
            return 0
        print(_dump({"status": outcome.status.value, "detail": outcome.detail}, args.pretty))
        return 1

    if args.command in ("currency", "date", "datetime"):
        formatter = {
            "currency": format_currency,
            "date": format_date,
            "datetime": format_datetime,
        }[args.command]
        print(formatter(args.value))
        return 0

    if args.command == "migrate":
        try:
            conn = migrations.connect()
        except OpticaError as exc:
            print(f"Erro: {exc}")
            return 1
        try:
            applied = migrations.apply_migrations(conn)
        except OpticaError as exc:
            print(f"Erro: {exc}")
            return 1
        finally:
            conn.close()
        print(_dump({"applied": applied}, args.pretty))
        return 0

    parser.error("Comando inválido")
    return 1


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
