"""Pydantic models to validate external payloads before they reach the app."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel


class AddressPayload(BaseModel):
    """Address record as returned by ViaCEP (``/ws/<cep>/json/``)."""

    cep: str
    logradouro: Optional[str] = None
    complemento: Optional[str] = None
    bairro: Optional[str] = None
    localidade: Optional[str] = None
    uf: Optional[str] = None

    model_config = {"extra": "allow"}

    def as_record(self) -> dict:
        """The record exactly as the service sent it."""
        return self.model_dump(exclude_unset=True)
