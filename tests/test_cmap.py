#! /usr/bin/env python
# encoding: utf-8
# A part of pdfscribe, derived from pdfrw (https://github.com/pmaupin/pdfrw)
# Copyright (C) 2006-2017 Patrick Maupin, Austin, Texas
# MIT license -- See LICENSE.txt for details

'''
Run from the directory above like so:
python -m tests.test_cmap
'''

from pdfscribe import PdfWriter, Ref, SystemInfo, write_cmap

import unittest


EXPECTED = b'''%!PS-Adobe-3.0 Resource-CMap
%%DocumentNeededResources: procset CIDInit
%%IncludeResource: procset CIDInit
%%BeginResource: CMap Custom
%%Title: (Custom Adobe Identity 0)
%%Version: 1
%%EndComments
/CIDInit /ProcSet findresource begin
9 dict begin
begincmap
/CIDSystemInfo 3 dict dup begin
    /Registry (Adobe) def
    /Ordering (Identity) def
    /Supplement 0 def
end def
/CMapName /Custom def
/CMapVersion 1 def
/CMapType 0 def
1 begincodespacerange
<0000> <ffff>
endcodespacerange
2 beginbfchar
<0001> <0041>
<0002> <D83DDE00>
endbfchar
endcmap
CMapName currentdict /CMap defineresource pop
end
end
%%EndResource
%%EOF'''

INFO = SystemInfo('Adobe', 'Identity', 0)


class TestCMap(unittest.TestCase):

    def setUp(self):
        self.writer = PdfWriter()
        self.start = len(self.writer.buf)

    def written(self):
        return bytes(self.writer.buf[self.start:])

    def stream_data(self):
        data = self.written()
        return data[data.index(b'\nstream\n') + 8:data.index(b'\nendstream')]

    def bfchar_lines(self):
        data = self.stream_data()
        body = data[data.index(b' beginbfchar\n') + 13:
                    data.index(b'endbfchar\n')]
        return body.splitlines()

    def test_script(self):
        write_cmap(self.writer, Ref(1), 'Custom', INFO,
                   [(1, 'A'), (2, '\U0001F600')])
        self.assertEqual(self.stream_data(), EXPECTED)

    def test_stream_dict(self):
        self.writer.cmap(Ref(1), 'Custom', INFO, [(1, 'A')])
        data = self.written()
        self.assertTrue(data.startswith(
            b'1 0 obj\n'
            b'<<\n'
            b'  /Length %d\n'
            b'  /Type /CMap\n'
            b'  /CMapName /Custom\n'
            b'  /CIDSystemInfo <<\n'
            b'    /Registry (Adobe)\n'
            b'    /Ordering (Identity)\n'
            b'    /Supplement 0\n'
            b'  >>\n'
            b'>>\n'
            b'stream\n' % len(self.stream_data())))
        # The object is complete as soon as write_cmap returns
        self.assertTrue(data.endswith(b'%%EOF\nendstream\nendobj\n\n'))

    def test_line_count(self):
        mapping = [(code, chr(0x4E00 + code)) for code in range(300)]
        write_cmap(self.writer, Ref(1), 'Custom', INFO, mapping)
        self.assertIn(b'\n300 beginbfchar\n', self.stream_data())
        lines = self.bfchar_lines()
        self.assertEqual(len(lines), 300)
        self.assertEqual(lines[0], b'<0000> <4E00>')
        self.assertEqual(lines[-1], b'<012B> <4F2B>')

    def test_empty(self):
        write_cmap(self.writer, Ref(1), 'Custom', INFO, [])
        self.assertIn(b'\n0 beginbfchar\nendbfchar\n', self.stream_data())

    def test_surrogates(self):
        mapping = [(0x10, '\uffff'), (0x11, '\U00010000'),
                   (0x12, 'z'), (0xFFFF, '\U0010FFFF')]
        write_cmap(self.writer, Ref(1), 'Custom', INFO, mapping)
        self.assertEqual(self.bfchar_lines(), [
            b'<0010> <FFFF>',
            b'<0011> <D800DC00>',
            b'<0012> <007A>',
            b'<FFFF> <DBFFDFFF>',
        ])

    def test_title_uses_raw_bytes(self):
        info = SystemInfo('Adobe', 'Japan1', 6)
        write_cmap(self.writer, Ref(1), 'Adobe-Japan1-UCS2', info,
                   [(1, 'a')])
        data = self.stream_data()
        self.assertIn(b'%%BeginResource: CMap Adobe-Japan1-UCS2\n', data)
        self.assertIn(b'%%Title: (Adobe-Japan1-UCS2 Adobe Japan1 6)\n', data)
        self.assertIn(b'    /Supplement 6 def\n', data)
        self.assertIn(b'/CMapName /Adobe-Japan1-UCS2 def\n', data)


def main():
    unittest.main()


if __name__ == '__main__':
    main()
