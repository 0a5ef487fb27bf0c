"""
Scanning module behavioral tests.

Scope
- Validate notation precedence (hex, octal, binary, decimal) and marker handling.
- Validate full-consumption rule (trailing characters are BADINT).
- Validate signed 64-bit bounds (OVERFLOW just outside, success at the edges).

Conventions
- Test method names follow CamelCase per project convention.
"""

from __future__ import annotations

import unittest
from unittest import TestCase

from argint import FaultCode, INT64_MAX, INT64_MIN, Scan, scan_integer


class TestNotations(TestCase):
    """Each notation reads its own literals."""

    def testDecimal(self):
        self.assertEqual(scan_integer("123"), Scan(123, 3, None))

    def testDecimalSigned(self):
        self.assertEqual(scan_integer("-42").value, -42)
        self.assertEqual(scan_integer("+42").value, 42)

    def testHexadecimal(self):
        self.assertEqual(scan_integer("0x1A"), Scan(26, 4, None))

    def testHexadecimalMarkerIsCaseInsensitive(self):
        self.assertEqual(scan_integer("0X1a").value, 26)

    def testHexadecimalSigned(self):
        self.assertEqual(scan_integer("-0x10").value, -16)
        self.assertEqual(scan_integer("+0x10").value, 16)

    def testOctal(self):
        self.assertEqual(scan_integer("0o17"), Scan(15, 4, None))
        self.assertEqual(scan_integer("0O17").value, 15)

    def testBinary(self):
        self.assertEqual(scan_integer("0b101"), Scan(5, 5, None))
        self.assertEqual(scan_integer("-0B101").value, -5)

    def testLeadingZerosAreDecimal(self):
        # No marker: plain decimal, not C-style octal.
        self.assertEqual(scan_integer("017").value, 17)

    def testLeadingWhitespaceIsSkipped(self):
        self.assertEqual(scan_integer("  42"), Scan(42, 4, None))
        self.assertEqual(scan_integer("\t0x2a"), Scan(42, 5, None))

    def testRoundTripThroughEachNotation(self):
        for value in (0, 1, -1, 26, -255, 1 << 40, INT64_MAX, INT64_MIN):
            for literal in (str(value), format(value, "#x"), format(value, "#o"), format(value, "#b")):
                with self.subTest(literal=literal):
                    scanned = scan_integer(literal)
                    self.assertIsNone(scanned.fault)
                    self.assertEqual(scanned.value, value)
                    self.assertEqual(scanned.consumed, len(literal))


class TestMalformed(TestCase):
    """Anything not consumed whole is BADINT."""

    def testEmpty(self):
        self.assertEqual(scan_integer(""), Scan(0, 0, FaultCode.BADINT))

    def testNotANumber(self):
        self.assertEqual(scan_integer("abc").fault, FaultCode.BADINT)
        self.assertEqual(scan_integer("abc").consumed, 0)

    def testSignOnly(self):
        self.assertEqual(scan_integer("-").fault, FaultCode.BADINT)

    def testTrailingLetters(self):
        scanned = scan_integer("123abc")
        self.assertEqual(scanned.fault, FaultCode.BADINT)
        self.assertEqual(scanned.consumed, 3)

    def testDecimalPoint(self):
        scanned = scan_integer("1.5")
        self.assertEqual(scanned.fault, FaultCode.BADINT)
        self.assertEqual(scanned.value, 1)

    def testTrailingWhitespace(self):
        self.assertEqual(scan_integer("42 ").fault, FaultCode.BADINT)

    def testMarkerWithoutDigits(self):
        # The prefixed notations do not apply, decimal stops at the leading zero.
        for literal in ("0x", "0o", "0b", "-0x"):
            with self.subTest(literal=literal):
                scanned = scan_integer(literal)
                self.assertEqual(scanned.fault, FaultCode.BADINT)

    def testDigitsOutsideTheBase(self):
        for literal in ("0o8", "0b2", "0xG"):
            with self.subTest(literal=literal):
                self.assertEqual(scan_integer(literal).fault, FaultCode.BADINT)

    def testPartialHexadecimal(self):
        scanned = scan_integer("0x1G")
        self.assertEqual(scanned.fault, FaultCode.BADINT)
        self.assertEqual(scanned.consumed, 3)

    def testDoubleMarker(self):
        self.assertEqual(scan_integer("0x0x1").fault, FaultCode.BADINT)

    def testNonAsciiDigits(self):
        self.assertEqual(scan_integer("١٢").fault, FaultCode.BADINT)

    def testNonAsciiWhitespace(self):
        for literal in ("\u300042", "\xa0-0x10", "\u20087"):
            with self.subTest(literal=literal):
                scanned = scan_integer(literal)
                self.assertEqual(scanned.fault, FaultCode.BADINT)
                self.assertEqual(scanned.consumed, 0)

    def testAsciiWhitespaceKinds(self):
        self.assertEqual(scan_integer(" \t\n\v\f\r5"), Scan(5, 7, None))

    def testRejectsNonStrings(self):
        with self.assertRaises(TypeError):
            scan_integer(12)


class TestBounds(TestCase):
    """Signed 64-bit limits."""

    def testEdgesAreAccepted(self):
        self.assertEqual(scan_integer("9223372036854775807"), Scan(INT64_MAX, 19, None))
        self.assertEqual(scan_integer("-9223372036854775808"), Scan(INT64_MIN, 20, None))

    def testJustAboveMaximum(self):
        scanned = scan_integer("9223372036854775808")
        self.assertEqual(scanned.fault, FaultCode.OVERFLOW)
        self.assertEqual(scanned.value, INT64_MAX + 1)

    def testJustBelowMinimum(self):
        self.assertEqual(scan_integer("-9223372036854775809").fault, FaultCode.OVERFLOW)

    def testHexadecimalBounds(self):
        self.assertEqual(scan_integer("-0x8000000000000000").value, INT64_MIN)
        self.assertIsNone(scan_integer("0x7fffffffffffffff").fault)
        self.assertEqual(scan_integer("0x8000000000000000").fault, FaultCode.OVERFLOW)
        self.assertEqual(scan_integer("0xffffffffffffffff").fault, FaultCode.OVERFLOW)

    def testBinaryOverflow(self):
        self.assertEqual(scan_integer("0b1" + "0" * 63).fault, FaultCode.OVERFLOW)

    def testVeryLongDecimals(self):
        self.assertEqual(scan_integer("9" * 5000).fault, FaultCode.OVERFLOW)
        self.assertEqual(scan_integer("-" + "9" * 5000).fault, FaultCode.OVERFLOW)

    def testVeryLongDecimalsSaturate(self):
        self.assertEqual(scan_integer("1" * 25), Scan(1 << 64, 25, FaultCode.OVERFLOW))
        self.assertEqual(scan_integer("-" + "1" * 25).value, -(1 << 64))

    def testLeadingZerosDoNotOverflow(self):
        self.assertEqual(scan_integer("0" * 40 + "7"), Scan(7, 41, None))

    def testMalformedWinsOverOverflow(self):
        self.assertEqual(scan_integer("99999999999999999999x").fault, FaultCode.BADINT)


if __name__ == "__main__":
    unittest.main()
