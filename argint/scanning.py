"""
Argint numeric scanning.

Converts one command-line token into a signed 64-bit integer.

Notations (tried in this order)
- hexadecimal  "0x1A"   (marker X, base 16)
- octal        "0o17"   (marker O, base 8)
- binary       "0b101"  (marker B, base 2)
- decimal      "123"    (no marker, base 10)

Each notation accepts leading ASCII whitespace and an optional sign ("+0x1f", " -12").
Markers are case-insensitive. A prefixed notation only counts when at least one
digit follows its marker; otherwise it consumes nothing and the next notation
is tried.

Classification
- nothing consumed by any notation     → FaultCode.BADINT
- trailing characters left unconsumed  → FaultCode.BADINT   ("1.5", "123abc", "0x")
- value outside [INT64_MIN, INT64_MAX] → FaultCode.OVERFLOW
- otherwise                            → success (fault is None)

Trying the prefixed notations first matters: the decimal notation alone would
stop at the leading "0" of "0x1A", and the full-consumption rule is what turns
any such partial match into BADINT.
"""
import re
from typing import NamedTuple

from .faults import FaultCode

INT64_MIN = -(1 << 63)
INT64_MAX = (1 << 63) - 1

# Decimal digits of INT64_MIN's magnitude; any longer (zero-stripped) run overflows.
_DECIMAL_WIDTH = len(str(-INT64_MIN))

# (marker, base, digits accepted after the marker)
_NOTATIONS = (
    ("X", 16, "0-9a-fA-F"),
    ("O", 8, "0-7"),
    ("B", 2, "01"),
)


def _compile(marker, digits):
    return re.compile(rf"\s*([+-]?)0[{marker}{marker.lower()}]([{digits}]+)", re.ASCII)


_PREFIXED = tuple((_compile(marker, digits), base) for marker, base, digits in _NOTATIONS)
_DECIMAL = re.compile(r"\s*([+-]?)([0-9]+)", re.ASCII)


class Scan(NamedTuple):
    """
    Outcome of scan_integer().

    - value: the signed value read (0 when nothing was consumed). Also set on
      OVERFLOW; decimals longer than 19 significant digits are not converted
      and carry a saturated +/-2**64 instead.
    - consumed: number of characters of the token the winning notation read.
    - fault: None on success, otherwise FaultCode.BADINT or FaultCode.OVERFLOW.
    """
    value: int
    consumed: int
    fault: FaultCode | None


def _match(pattern, base, text):
    # Returns (value, consumed); consumed is 0 when the notation does not apply.
    if not (match := pattern.match(text)):
        return 0, 0
    sign, digits = match.groups()
    if base == 10 and len(digits.lstrip("0")) > _DECIMAL_WIDTH:
        # Saturate far out-of-range decimals instead of converting arbitrarily long strings.
        value = 1 << 64
    else:
        value = int(digits, base)
    return (-value if sign == "-" else value), match.end()


def scan_integer(text, /):
    """
    Scan `text` as a signed 64-bit integer.

    Returns
    - Scan(value, consumed, fault); see the module docstring for the rules.

    Examples
    - scan_integer("0x1A")  -> Scan(26, 4, None)
    - scan_integer("-0b11") -> Scan(-3, 5, None)
    - scan_integer("1.5")   -> Scan(1, 1, FaultCode.BADINT)
    """
    if not isinstance(text, str):
        raise TypeError("scan_integer() argument must be a string")

    for pattern, base in _PREFIXED:
        value, consumed = _match(pattern, base, text)
        if consumed:
            break
    else:
        value, consumed = _match(_DECIMAL, 10, text)

    if not consumed or consumed != len(text):
        return Scan(value, consumed, FaultCode.BADINT)
    if not INT64_MIN <= value <= INT64_MAX:
        return Scan(value, consumed, FaultCode.OVERFLOW)
    return Scan(value, consumed, None)


__all__ = (
    "INT64_MIN",
    "INT64_MAX",
    "Scan",
    "scan_integer",
)
