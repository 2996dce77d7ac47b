"""Masked text field state: formats keystrokes and reports both representations."""

from __future__ import annotations

from typing import Any, Callable, Dict, Optional, Union

from optica.common.masks import MaskKind, apply_mask, only_digits, validate

ChangeListener = Callable[[str, str], None]


class MaskedInputField:
    """Display state for a text input bound to a :class:`MaskKind`.

    The displayed text is always ``apply_mask(mask, last_input)``, where the last
    input is either the latest keystroke (:meth:`input`) or the latest external
    value (:meth:`sync`). Only keystrokes notify ``on_change``, once each, with
    ``(unmasked, masked)``.
    """

    def __init__(
        self,
        mask: Union[MaskKind, str],
        value: Any = "",
        on_change: Optional[ChangeListener] = None,
        **attrs: Any,
    ) -> None:
        self._mask = MaskKind.parse(mask)
        self._display = ""
        self.on_change = on_change
        self.attrs: Dict[str, Any] = dict(attrs)
        self.sync(value)

    @property
    def mask(self) -> MaskKind:
        return self._mask

    @property
    def display(self) -> str:
        return self._display

    @property
    def unmasked(self) -> str:
        return only_digits(self._display)

    @property
    def is_valid(self) -> bool:
        return validate(self._mask, self._display)

    def sync(self, value: Any, mask: Union[MaskKind, str, None] = None) -> str:
        """Re-derive the display from an externally supplied value."""
        if mask is not None:
            self._mask = MaskKind.parse(mask)
        self._display = apply_mask(self._mask, "" if value is None else str(value))
        return self._display

    def input(self, raw: str) -> str:
        """Handle a keystroke: ``raw`` is the whole text as the user left it."""
        raw = raw or ""
        self._display = apply_mask(self._mask, raw)
        if self.on_change is not None:
            self.on_change(only_digits(raw), self._display)
        return self._display

    def type_text(self, text: str) -> str:
        """Type ``text`` one character at a time after the current display."""
        for char in text:
            self.input(f"{self._display}{char}")
        return self._display
