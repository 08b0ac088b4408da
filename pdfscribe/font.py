# A part of pdfscribe, derived from pdfrw (https://github.com/pmaupin/pdfrw)
# Copyright (C) 2006-2017 Patrick Maupin, Austin, Texas
# MIT license -- See LICENSE.txt for details

'''
Writers for font dictionaries.

Each writer wraps one Dict that is the body of an indirect object.
start() writes the fixed /Type and /Subtype entries, and each setter
writes exactly one more entry and returns the writer, so calls can
be chained:

    font = writer.type0_font(ref)
    font.base_font(PdfName('Arial-Bold')).descendant_font(cid_ref)

Nothing here checks that the required entries were all written.
'''

import enum
from collections import namedtuple

from .objects import PdfName, Name, Str, Rect


class _DictWriter(object):
    ''' Common code for the font writers:  context manager
        support, and writing one entry at a time.
    '''

    def __init__(self, dict):
        self.dict = dict

    def __enter__(self):
        self.dict.__enter__()
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.dict.__exit__(exc_type, exc_value, traceback)

    def _pair(self, key, value):
        self.dict.pair(key, value)
        return self


class _FontDict(_DictWriter):

    def base_font(self, name):
        return self._pair(PdfName.BaseFont, Name(name))


class Type1Font(_FontDict):
    ''' A simple Type 1 font.
    '''

    @classmethod
    def start(cls, any):
        dict = any.dict()
        dict.pair(PdfName.Type, PdfName.Font)
        dict.pair(PdfName.Subtype, PdfName.Type1)
        return cls(dict)


class Type0Font(_FontDict):
    ''' A Type 0 (composite) font.
    '''

    @classmethod
    def start(cls, any):
        dict = any.dict()
        dict.pair(PdfName.Type, PdfName.Font)
        dict.pair(PdfName.Subtype, PdfName.Type0)
        return cls(dict)

    def encoding_predefined(self, encoding):
        ''' Use a predefined CMap, e.g. Identity-H, as /Encoding.
        '''
        return self._pair(PdfName.Encoding, Name(encoding))

    def encoding_cmap(self, cmap):
        ''' Use a reference to an embedded CMap stream as /Encoding.
        '''
        return self._pair(PdfName.Encoding, cmap)

    def descendant_font(self, cid_font):
        ''' /DescendantFonts is a one-element array holding a
            reference to the CID font.
        '''
        self.dict.key(PdfName.DescendantFonts).array().item(cid_font)
        return self

    def to_unicode(self, cmap):
        return self._pair(PdfName.ToUnicode, cmap)


class CIDFontType(enum.Enum):
    ''' The subtype of a CID font, which depends on the kind
        of glyph descriptions in the font program.
    '''
    TYPE0 = 'CIDFontType0'    # Compact (CFF) outlines
    TYPE2 = 'CIDFontType2'    # TrueType outlines

    @property
    def pdf_name(self):
        return Name(self.value)


class CIDFont(_FontDict):
    ''' A CID font, the descendant of a Type 0 font.
    '''

    @classmethod
    def start(cls, any, subtype):
        dict = any.dict()
        dict.pair(PdfName.Type, PdfName.Font)
        dict.pair(PdfName.Subtype, CIDFontType(subtype).pdf_name)
        return cls(dict)

    def system_info(self, info):
        info.write(self.dict.key(PdfName.CIDSystemInfo))
        return self

    def font_descriptor(self, descriptor):
        return self._pair(PdfName.FontDescriptor, descriptor)

    def widths(self):
        ''' Start the /W array.  The returned Widths writer stays
            usable until the next entry is written to this font.
        '''
        return Widths.start(self.dict.key(PdfName.W))


class Widths(object):
    ''' The /W array of a CID font.

        Each call appends one run, in either of the two forms
        the format allows.  Runs are written exactly as given;
        adjacent runs are not merged.
    '''

    def __init__(self, array):
        self.array = array

    @classmethod
    def start(cls, any):
        return cls(any.array())

    def __enter__(self):
        self.array.__enter__()
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.array.__exit__(exc_type, exc_value, traceback)

    def individual(self, start, widths):
        ''' Widths for consecutive CIDs starting at start:
            "start [w1 w2 ...]"
        '''
        array = self.array
        array.item(int(start))
        array.any().array().typed(float).items(widths)
        return self

    def same(self, first, last, width):
        ''' One width for the CIDs first to last (inclusive):
            "first last w"
        '''
        self.array.item(int(first)).item(int(last)).item(float(width))
        return self


class FontFlags(enum.IntFlag):
    ''' The /Flags bits of a font descriptor.  Combine with |.
        Nothing stops SYMBOLIC and NON_SYMBOLIC from both being set.
    '''
    FIXED_PITCH = 1 << 0
    SERIF = 1 << 1
    SYMBOLIC = 1 << 2
    SCRIPT = 1 << 3
    NON_SYMBOLIC = 1 << 5
    ITALIC = 1 << 6
    ALL_CAP = 1 << 16
    SMALL_CAP = 1 << 17
    FORCE_BOLD = 1 << 18


class FontDescriptor(_DictWriter):
    ''' A font descriptor.  It has no /Subtype and no /BaseFont;
        the font is named with font_name().
    '''

    @classmethod
    def start(cls, any):
        dict = any.dict()
        dict.pair(PdfName.Type, PdfName.FontDescriptor)
        return cls(dict)

    def font_name(self, name):
        return self._pair(PdfName.FontName, Name(name))

    def font_flags(self, flags):
        return self._pair(PdfName.Flags, int(flags))

    def font_bbox(self, bbox):
        return self._pair(PdfName.FontBBox, Rect(*bbox))

    def italic_angle(self, angle):
        return self._pair(PdfName.ItalicAngle, float(angle))

    def ascent(self, ascent):
        return self._pair(PdfName.Ascent, float(ascent))

    def descent(self, descent):
        return self._pair(PdfName.Descent, float(descent))

    def cap_height(self, cap_height):
        return self._pair(PdfName.CapHeight, float(cap_height))

    def stem_v(self, stem_v):
        return self._pair(PdfName.StemV, float(stem_v))

    def font_file2(self, true_type_stream):
        ''' Reference to a stream holding a TrueType font program.
        '''
        return self._pair(PdfName.FontFile2, true_type_stream)


class SystemInfo(namedtuple('SystemInfo', 'registry ordering supplement')):
    ''' Identifies a character collection, e.g.
        SystemInfo('Adobe', 'Identity', 0).
    '''
    __slots__ = ()

    def __new__(cls, registry, ordering, supplement):
        return super(SystemInfo, cls).__new__(
            cls, Str(registry), Str(ordering), int(supplement))

    def write(self, any):
        any.dict() \
            .pair(PdfName.Registry, self.registry) \
            .pair(PdfName.Ordering, self.ordering) \
            .pair(PdfName.Supplement, self.supplement)
