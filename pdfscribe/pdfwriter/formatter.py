# A part of pdfscribe, derived from pdfrw (https://github.com/pmaupin/pdfrw)
# Copyright (C) 2006-2017 Patrick Maupin, Austin, Texas
# MIT license -- See LICENSE.txt for details

"""
This module contains formatters to convert scalar PDF values
into the byte strings that are written to the output.

Reals deserve a note.  PDF does not allow exponent notation, and
the values handled here are single precision, so a real is first
rounded to single precision and then written with the fewest
significant digits that read back as exactly the same single
precision value.  That is never more than nine digits, but the
digits may sit far from the decimal point (1e-10 is written as
0.0000000001).
"""

import math
import struct
from decimal import Decimal

from ..errors import PdfOutputError, log
from ..objects import Name, Str, HexStr, Ref, Rect

_single = struct.Struct('<f')


def to_single(value, pack=_single.pack, unpack=_single.unpack):
    """ Round a Python float to the nearest single precision value.
        Values too large for single precision become infinite.
    """
    try:
        return unpack(pack(value))[0]
    except OverflowError:
        return math.copysign(float('inf'), value)


def format_int(obj):
    return b'%d' % obj


def format_real(obj, to_single=to_single, isfinite=math.isfinite,
                int=int, float=float):
    value = to_single(float(obj))
    if not isfinite(value):
        log.warning('Cannot write non-finite real %r' % obj)
        return repr(value).encode('ascii')

    # Whole numbers are common (sizes, widths, coordinates).  Below
    # 2**24 every integer is a distinct single, so no digit can go.
    whole = int(value)
    if value == whole and abs(whole) < 2 ** 24:
        return b'%d' % whole

    for digits in range(9):
        nearest = Decimal('%.*e' % (digits, value))
        # Next to a power of two the gap below a value is half the gap
        # above it, so a neighbour of the nearest decimal may still
        # read back as value when the nearest one does not.
        unit = Decimal(1).scaleb(nearest.adjusted() - digits)
        for text in (nearest, nearest - unit, nearest + unit):
            if to_single(float(text)) == value:
                break
        else:
            continue
        break
    text = format(text, 'f')
    if '.' in text:
        text = text.rstrip('0').rstrip('.')
    return text.encode('ascii')


def format_name(obj):
    return b'/' + obj


def format_string(obj):
    return obj.encoded()


def format_rect(obj, format_real=format_real):
    return b'[' + b' '.join(format_real(x) for x in obj) + b']'


class FormatHandlers(object):
    """
        Return a format handler for a given object type
    """

    formatters = [
        (bool, lambda obj: b'true' if obj else b'false'),
        (int, format_int),
        (float, format_real),
        (Name, format_name),
        (Str, format_string),
        (HexStr, format_string),
        (Ref, format_string),
        (Rect, format_rect),
        (type(None), lambda obj: b'null'),
        ]

    @classmethod
    def get_formatter(cls, obj_type):
        for superclass, handler in cls.formatters:
            if issubclass(obj_type, superclass):
                return handler
        raise PdfOutputError('Cannot write %s objects; wrap them in one of '
                             'Name, Str, HexStr, Ref or Rect'
                             % obj_type.__name__)

    @classmethod
    def formatter(cls):
        """ Return a callable that formats any supported value.
            Handlers are looked up once per type; indexing the
            callable with a type returns the handler for that type.
        """
        get_formatter = cls.get_formatter

        class memodict(dict):
            def __missing__(self, obj_type):
                handler = self[obj_type] = get_formatter(obj_type)
                return handler

            def __call__(self, obj):
                return self[type(obj)](obj)

        return memodict()
