#! /usr/bin/env python
# encoding: utf-8
# A part of pdfscribe, derived from pdfrw (https://github.com/pmaupin/pdfrw)
# Copyright (C) 2006-2017 Patrick Maupin, Austin, Texas
# MIT license -- See LICENSE.txt for details

'''
Run from the directory above like so:
python -m tests.test_formatter
'''

import random
import struct

from pdfscribe import PdfName, Name, Str, HexStr, Ref, Rect, PdfOutputError
from pdfscribe.pdfwriter.formatter import (FormatHandlers, format_real,
                                           to_single)

import unittest


class TestScalars(unittest.TestCase):

    def setUp(self):
        self.fmt = FormatHandlers.formatter()

    def test_ints(self):
        self.assertEqual(self.fmt(0), b'0')
        self.assertEqual(self.fmt(42), b'42')
        self.assertEqual(self.fmt(-17), b'-17')

    def test_bool_is_not_int(self):
        self.assertEqual(self.fmt(True), b'true')
        self.assertEqual(self.fmt(False), b'false')

    def test_null(self):
        self.assertEqual(self.fmt(None), b'null')

    def test_names(self):
        self.assertEqual(self.fmt(Name('F1')), b'/F1')
        self.assertEqual(self.fmt(PdfName.Type), b'/Type')
        self.assertEqual(self.fmt(PdfName('Identity-H')), b'/Identity-H')
        self.assertEqual(PdfName.Font, Name(b'Font'))

    def test_bad_string_types(self):
        self.assertRaises(TypeError, Name, 5)
        self.assertRaises(TypeError, Name, None)
        self.assertRaises(TypeError, PdfName, 3)
        self.assertRaises(TypeError, Str, 5)
        self.assertRaises(TypeError, HexStr, 2)
        self.assertEqual(self.fmt(HexStr(bytearray(b'\x01'))), b'<01>')

    def test_literal_strings(self):
        self.assertEqual(self.fmt(Str('Adobe')), b'(Adobe)')
        self.assertEqual(self.fmt(Str(b'a(b)c\\')), b'(a\\(b\\)c\\\\)')
        self.assertEqual(self.fmt(Str(b'')), b'()')

    def test_hex_strings(self):
        self.assertEqual(self.fmt(HexStr(b'Hi')), b'<4869>')
        self.assertEqual(self.fmt(HexStr(b'\x00\xab\xff')), b'<00ABFF>')
        self.assertEqual(self.fmt(HexStr(b'')), b'<>')

    def test_refs(self):
        self.assertEqual(self.fmt(Ref(5)), b'5 0 R')
        self.assertEqual(self.fmt(Ref(3, 1)), b'3 1 R')
        self.assertEqual(Ref(5), Ref(5, 0))
        self.assertNotEqual(Ref(5), Ref(6))
        self.assertEqual({Ref(5): 'x'}[Ref(5)], 'x')
        self.assertEqual((Ref(7).num, Ref(7).gen), (7, 0))

    def test_rect(self):
        self.assertEqual(self.fmt(Rect(0, 0, 595.5, 842)),
                         b'[0 0 595.5 842]')

    def test_unsupported(self):
        self.assertRaises(PdfOutputError, self.fmt, 'text')
        self.assertRaises(PdfOutputError, self.fmt, b'bytes')
        self.assertRaises(PdfOutputError, self.fmt, [1, 2])

    def test_handler_lookup(self):
        self.assertIs(self.fmt[float], format_real)


class TestReals(unittest.TestCase):

    def test_whole(self):
        self.assertEqual(format_real(12.0), b'12')
        self.assertEqual(format_real(500), b'500')
        self.assertEqual(format_real(-3.0), b'-3')
        self.assertEqual(format_real(-0.0), b'0')

    def test_fractions(self):
        self.assertEqual(format_real(0.5), b'0.5')
        self.assertEqual(format_real(-1.5), b'-1.5')
        self.assertEqual(format_real(0.1), b'0.1')
        self.assertEqual(format_real(123456.789), b'123456.79')

    def test_no_exponent(self):
        self.assertEqual(format_real(1e-10), b'0.0000000001')
        big = format_real(3e38)
        self.assertEqual(big, b'3' + b'0' * 38)

    def test_large_whole(self):
        self.assertEqual(format_real(16777215.0), b'16777215')
        self.assertEqual(format_real(16777216.0), b'16777216')
        self.assertEqual(format_real(134217728.0), b'134217730')
        self.assertEqual(format_real(-134217728), b'-134217730')

    def test_shortest_next_to_power_of_two(self):
        # 2**-96 needs the decimal just above the nearest one
        self.assertEqual(format_real(2.0 ** -96),
                         b'0.' + b'0' * 28 + b'12621775')

    def test_non_finite(self):
        with self.assertLogs('pdfscribe', 'WARNING'):
            self.assertEqual(format_real(float('inf')), b'inf')
        with self.assertLogs('pdfscribe', 'WARNING'):
            self.assertEqual(format_real(-1e39), b'-inf')

    def check_roundtrip(self, value):
        text = format_real(value)
        self.assertNotIn(b'e', text)
        self.assertNotIn(b'E', text)
        if b'.' in text:
            self.assertFalse(text.endswith(b'0'), text)
            self.assertFalse(text.endswith(b'.'), text)
        self.assertEqual(to_single(float(text)), value, text)

    def test_roundtrip_random_singles(self):
        rng = random.Random(4242)
        unpack = struct.Struct('<f').unpack
        checked = 0
        while checked < 3000:
            bits = rng.getrandbits(32)
            value, = unpack(struct.pack('<I', bits))
            if value != value or value in (float('inf'), float('-inf')):
                continue
            self.check_roundtrip(value)
            checked += 1

    def test_roundtrip_edges(self):
        unpack = struct.Struct('<f').unpack
        for bits in (0x00000001, 0x007FFFFF, 0x00800000,
                     0x7F7FFFFF, 0x3F800001, 0xBF7FFFFF):
            value, = unpack(struct.pack('<I', bits))
            self.check_roundtrip(value)


def main():
    unittest.main()


if __name__ == '__main__':
    main()
