from __future__ import annotations

from flask import Blueprint, abort, jsonify, request

from optica.backend.services.address_service import AddressService
from optica.common.locale_format import format_currency, format_date, format_datetime
from optica.common.masks import MaskKind, apply_mask, only_digits, validate
from optica.db.sources.viacep_client import LookupStatus

api_bp = Blueprint("api", __name__)
service = AddressService()

_FORMATTERS = {
    "currency": format_currency,
    "date": format_date,
    "datetime": format_datetime,
}


@api_bp.get("/health")
def health_check():
    return jsonify({"status": "ok"})


@api_bp.get("/masks/<kind>")
def mask_value(kind: str):
    try:
        mask = MaskKind.parse(kind)
    except ValueError:
        abort(404, description=f"Máscara desconhecida: {kind}")
    value = request.args.get("value", "")
    masked = apply_mask(mask, value)
    return jsonify(
        {
            "kind": mask.value,
            "masked": masked,
            "unmasked": only_digits(masked),
            "valid": validate(mask, value),
        },
    )


@api_bp.get("/cep/<cep>")
def cep_lookup(cep: str):
    outcome = service.lookup_address(cep)
    if outcome.status is LookupStatus.ERROR:
        abort(502, description="Serviço de CEP indisponível.")
    if outcome.status is LookupStatus.NOT_FOUND:
        abort(404, description=f"CEP não encontrado: {cep}")
    return jsonify(outcome.as_record())


@api_bp.get("/format/<kind>")
def format_value(kind: str):
    formatter = _FORMATTERS.get(kind)
    if formatter is None:
        abort(404, description=f"Formato desconhecido: {kind}")
    value = request.args.get("value")
    if value is None:
        abort(400, description="Parâmetro 'value' é obrigatório.")
    return jsonify({"formatted": formatter(value)})
