# A part of pdfscribe, derived from pdfrw (https://github.com/pmaupin/pdfrw)
# Copyright (C) 2006-2017 Patrick Maupin, Austin, Texas
#                    2016 James Laird-Wah, Sydney, Australia
# MIT license -- See LICENSE.txt for details

"""
PDF string values.

A PDF string can represent pure binary data (e.g. glyph indices) or
text.  The PDF reference defines two ways of delimiting the bytes of
a string so that a tokenizer can find where it ends:

  - Literal strings are delimited by parentheses.  Any parenthesis or
    backslash inside the data must be escaped with a backslash.
  - Hexadecimal strings are delimited by angle brackets, and store
    each byte as two hexadecimal digits.  Lower and upper case digits
    are both allowed; upper case is the convention and is what is
    written here.

This module does no text encoding.  A Str or HexStr holds raw bytes,
and what those bytes mean (PDFDocEncoding, UTF-16-BE, glyph ids) is
up to the caller.
"""

import re
import binascii


def _check_bytes(cls, value, bytes_like=(bytes, bytearray, memoryview)):
    # bytes(5) would silently give five NUL bytes
    if not isinstance(value, bytes_like):
        raise TypeError('Cannot make a %s from %s'
                        % (cls.__name__, type(value).__name__))
    return value


class Str(bytes):
    """ A Str is a byte string that is written out as a
        literal string, e.g. (Adobe).

        It may be built from bytes, or from a str, in which
        case it is encoded as Latin-1.
    """

    escape_splitter = re.compile(br'(\(|\\|\))').split

    def __new__(cls, value, new=bytes.__new__):
        if isinstance(value, str):
            value = value.encode('latin-1')
        return new(cls, _check_bytes(cls, value))

    def __repr__(self):
        return 'Str(%r)' % bytes(self)

    def encoded(self):
        """ Return the literal-string encoding of the data,
            with the delimiters.
        """
        splitlist = self.escape_splitter(self)
        splitlist[1::2] = [(b'\\' + x) for x in splitlist[1::2]]
        return b'(' + b''.join(splitlist) + b')'


class HexStr(bytes):
    """ A HexStr is a byte string that is written out as a
        hexadecimal string, e.g. <4869>.
    """

    def __new__(cls, value, new=bytes.__new__):
        return new(cls, _check_bytes(cls, value))

    def __repr__(self):
        return 'HexStr(%r)' % bytes(self)

    def encoded(self):
        return b'<' + binascii.hexlify(self).upper() + b'>'
