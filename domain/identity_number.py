"""
Domain: customer identity number (Brazilian CPF).

Rules implemented here:
- The raw input may carry any punctuation. Compatibility forms (fullwidth digits)
  are folded to ASCII, then only the ASCII digits 0-9 are kept.
- A valid number has exactly 11 digits and they are not all identical.
- Digits 10 and 11 are mod-11 check digits over the preceding digits
  (weights 10..2 for the first, 11..2 for the second; remainder 10 or 11 maps to 0).

Pure value object: no I/O, constructed fresh whenever validation is needed.
"""

from __future__ import annotations

import re
import unicodedata
from dataclasses import dataclass

from .errors import InvalidIdentityNumberChecksum, InvalidIdentityNumberFormat

_NON_DIGITS = re.compile(r"[^0-9]")
_NORMALIZED = re.compile(r"[0-9]{11}")


def _check_digit(digits: str) -> int:
    """Compute the check digit for the given prefix (9 or 10 digits)."""

    first_weight = len(digits) + 1
    total = sum(int(d) * (first_weight - i) for i, d in enumerate(digits))
    remainder = (total * 10) % 11
    return 0 if remainder >= 10 else remainder


@dataclass(frozen=True, slots=True)
class IdentityNumber:
    """
    Validated, normalized 11-digit identity number.

    Build it with `IdentityNumber.parse(raw)`; the constructor itself only accepts
    an already-normalized value and still enforces every invariant.
    """

    value: str

    def __post_init__(self) -> None:
        if not _NORMALIZED.fullmatch(self.value):
            raise InvalidIdentityNumberFormat("CPF must have 11 digits")

        if len(set(self.value)) == 1:
            raise InvalidIdentityNumberChecksum("Invalid CPF")

        if _check_digit(self.value[:9]) != int(self.value[9]):
            raise InvalidIdentityNumberChecksum("Invalid CPF")

        if _check_digit(self.value[:10]) != int(self.value[10]):
            raise InvalidIdentityNumberChecksum("Invalid CPF")

    @classmethod
    def parse(cls, raw: str) -> "IdentityNumber":
        """Fold compatibility digits, strip everything but 0-9 from `raw` and validate."""

        folded = unicodedata.normalize("NFKC", raw or "")
        return cls(_NON_DIGITS.sub("", folded))

    @property
    def formatted(self) -> str:
        """Human-readable form: XXX.XXX.XXX-XX."""

        v = self.value
        return f"{v[0:3]}.{v[3:6]}.{v[6:9]}-{v[9:11]}"

    def __str__(self) -> str:
        return self.value


__all__ = ["IdentityNumber"]
