"""Input masks for Brazilian documents (CPF, phone numbers and CEP)."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Tuple

_NON_DIGITS = re.compile(r"[^0-9]")


@dataclass(frozen=True)
class MaskPattern:
    """Digit groups and the literals placed around them.

    ``separators[i]`` goes between group ``i`` and group ``i + 1``; ``prefix`` is
    emitted once the first group is complete and more digits follow.
    """

    groups: Tuple[int, ...]
    separators: Tuple[str, ...]
    prefix: str = ""

    @property
    def max_digits(self) -> int:
        return sum(self.groups)

    def render(self, digits: str) -> str:
        digits = digits[: self.max_digits]
        if len(digits) <= self.groups[0]:
            return digits

        parts = []
        start = 0
        for size in self.groups:
            chunk = digits[start : start + size]
            if not chunk:
                break
            parts.append(chunk)
            start += size

        rendered = parts[0]
        for separator, chunk in zip(self.separators, parts[1:]):
            rendered += f"{separator}{chunk}"
        return f"{self.prefix}{rendered}"


CPF_PATTERN = MaskPattern(groups=(3, 3, 3, 2), separators=(".", ".", "-"))
LANDLINE_PATTERN = MaskPattern(groups=(2, 4, 4), separators=(") ", "-"), prefix="(")
MOBILE_PATTERN = MaskPattern(groups=(2, 5, 4), separators=(") ", "-"), prefix="(")
CEP_PATTERN = MaskPattern(groups=(5, 3), separators=("-",))


class MaskKind(str, Enum):
    CPF = "cpf"
    PHONE = "phone"
    CEP = "cep"

    @classmethod
    def parse(cls, name: str) -> "MaskKind":
        try:
            return cls((name or "").strip().lower())
        except ValueError:
            raise ValueError(f"Unknown mask kind: {name!r}") from None

    @property
    def patterns(self) -> Tuple[MaskPattern, ...]:
        """Candidate layouts ordered by capacity; the first that fits wins."""
        return _PATTERNS[self]

    @property
    def max_digits(self) -> int:
        return self.patterns[-1].max_digits


_PATTERNS: Dict[MaskKind, Tuple[MaskPattern, ...]] = {
    MaskKind.CPF: (CPF_PATTERN,),
    MaskKind.PHONE: (LANDLINE_PATTERN, MOBILE_PATTERN),
    MaskKind.CEP: (CEP_PATTERN,),
}


def only_digits(value: str) -> str:
    if value is None:
        return ""
    return _NON_DIGITS.sub("", str(value))


unmask = only_digits


def apply_mask(kind: MaskKind, value: str) -> str:
    """Format ``value`` for display, silently dropping non-digits and excess digits."""
    kind = MaskKind(kind)
    digits = only_digits(value)[: kind.max_digits]
    for pattern in kind.patterns:
        if len(digits) <= pattern.max_digits:
            return pattern.render(digits)
    return kind.patterns[-1].render(digits)


def format_cpf(value: str) -> str:
    return apply_mask(MaskKind.CPF, value)


def format_phone(value: str) -> str:
    return apply_mask(MaskKind.PHONE, value)


def format_cep(value: str) -> str:
    return apply_mask(MaskKind.CEP, value)


def _cpf_check_digit(digits: str) -> int:
    weight = len(digits) + 1
    total = sum(int(digit) * (weight - index) for index, digit in enumerate(digits))
    remainder = total % 11
    return 0 if remainder < 2 else 11 - remainder


def is_valid_cpf(value: str) -> bool:
    digits = only_digits(value)
    if len(digits) != 11:
        return False
    if digits == digits[0] * 11:
        return False
    if _cpf_check_digit(digits[:9]) != int(digits[9]):
        return False
    return _cpf_check_digit(digits[:10]) == int(digits[10])


def is_valid_phone(value: str) -> bool:
    return 10 <= len(only_digits(value)) <= 11


def is_valid_cep(value: str) -> bool:
    return len(only_digits(value)) == 8


_VALIDATORS = {
    MaskKind.CPF: is_valid_cpf,
    MaskKind.PHONE: is_valid_phone,
    MaskKind.CEP: is_valid_cep,
}


def validate(kind: MaskKind, value: str) -> bool:
    return _VALIDATORS[MaskKind(kind)](value)
