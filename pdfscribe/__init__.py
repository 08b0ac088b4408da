# A part of pdfscribe, derived from pdfrw (https://github.com/pmaupin/pdfrw)
# Copyright (C) 2006-2017 Patrick Maupin, Austin, Texas
# MIT license -- See LICENSE.txt for details

from .pdfwriter import PdfWriter
from .objects import (PdfName, Name, Str, HexStr, Ref, Rect,
                      Any, Dict, Array, TypedArray)
from .content import TextStream
from .font import (Type1Font, Type0Font, CIDFont, CIDFontType, Widths,
                   FontDescriptor, FontFlags, SystemInfo)
from .cmap import write_cmap
from .errors import PdfError, PdfOutputError, PdfStructureError

__version__ = '0.1'

__all__ = """PdfWriter PdfName Name Str HexStr Ref Rect
             Any Dict Array TypedArray TextStream
             Type1Font Type0Font CIDFont CIDFontType Widths
             FontDescriptor FontFlags SystemInfo write_cmap
             PdfError PdfOutputError PdfStructureError""".split()
