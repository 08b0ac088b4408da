# A part of pdfscribe, derived from pdfrw (https://github.com/pmaupin/pdfrw)
# Copyright (C) 2006-2017 Patrick Maupin, Austin, Texas
# MIT license -- See LICENSE.txt for details

'''
Builder for text content streams.

    data = TextStream().tf(PdfName.F1, 12).td(72, 720).tj(b'Hi').end()

gives the bytes of a BT ... ET text object, ready to be passed to
PdfWriter.stream().  Operators are written in the order they are
called, one per line.  Nothing checks that the sequence makes sense.
'''

from .objects import Name, HexStr
from .pdfwriter.formatter import format_real, format_name
from .errors import PdfStructureError


class TextStream(object):
    ''' A stream of text operations.
    '''

    def __init__(self):
        self.buf = bytearray(b'BT\n')

    def _operator(self, operator, *operands):
        buf = self.buf
        if buf is None:
            raise PdfStructureError('TextStream was already ended')
        for operand in operands:
            buf += operand
            buf += b' '
        buf += operator
        buf += b'\n'
        return self

    def tf(self, font, size):
        ''' Tf: select a font by resource name, and a font size.
        '''
        return self._operator(b'Tf', format_name(Name(font)),
                              format_real(size))

    def td(self, x, y):
        ''' Td: move to the start of the next line, offset by (x, y).
        '''
        return self._operator(b'Td', format_real(x), format_real(y))

    def tm(self, a, b, c, d, e, f):
        ''' Tm: set the text matrix.
        '''
        return self._operator(b'Tm', *[format_real(x)
                                       for x in (a, b, c, d, e, f)])

    def tj(self, text):
        ''' Tj: show text.  The text is raw bytes, written as a hex
            string; encoding it for the current font is up to the caller.
        '''
        return self._operator(b'Tj', HexStr(text).encoded())

    def end(self):
        ''' Write ET and return the finished stream data.
            The builder can't be used after this.
        '''
        buf = self.buf
        if buf is None:
            raise PdfStructureError('TextStream was already ended')
        self.buf = None
        buf += b'ET'
        return bytes(buf)
