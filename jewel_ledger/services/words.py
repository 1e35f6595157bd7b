"""Rupee amounts in words using the Indian numbering system."""

from __future__ import annotations

_INDIAN_SCALE = [
    (10000000, "Crore"),
    (100000, "Lakh"),
    (1000, "Thousand"),
    (100, "Hundred"),
]

_ONES = [
    "Zero",
    "One",
    "Two",
    "Three",
    "Four",
    "Five",
    "Six",
    "Seven",
    "Eight",
    "Nine",
    "Ten",
    "Eleven",
    "Twelve",
    "Thirteen",
    "Fourteen",
    "Fifteen",
    "Sixteen",
    "Seventeen",
    "Eighteen",
    "Nineteen",
]
_TENS = [
    "", "", "Twenty", "Thirty", "Forty", "Fifty", "Sixty", "Seventy", "Eighty", "Ninety",
]


def _two_digit_words(value: int) -> str:
    if value < 20:
        return _ONES[value]
    tens, ones = divmod(value, 10)
    if ones:
        return f"{_TENS[tens]}-{_ONES[ones].lower()}"
    return _TENS[tens]


def to_words(amount: int) -> str:
    """Spell out a non-negative whole rupee amount.

    Groups are emitted most significant first (crore, lakh, thousand, hundred)
    and a group with no value never produces its scale word. Crore counts
    above 99 are spelled with the same scale, e.g. ``One Hundred Crore``.
    """
    if amount == 0:
        return "Zero"

    parts: list[str] = []
    remaining = amount

    for divider, label in _INDIAN_SCALE:
        current, remaining = divmod(remaining, divider)
        if current:
            group = to_words(current) if current > 99 else _two_digit_words(current)
            parts.append(f"{group} {label}")

    if remaining:
        parts.append(_two_digit_words(remaining))

    return " ".join(parts)


def amount_in_words(amount: int) -> str:
    """Printable form used on invoices, e.g. ``One Thousand Rupees Only``."""
    if amount < 0:
        return f"Minus {to_words(-amount)} Rupees Only"
    return f"{to_words(amount)} Rupees Only"
