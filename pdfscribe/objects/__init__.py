# A part of pdfscribe, derived from pdfrw (https://github.com/pmaupin/pdfrw)
# Copyright (C) 2006-2017 Patrick Maupin, Austin, Texas
# MIT license -- See LICENSE.txt for details

'''
Objects that can be written to PDF files.  The scalar value
types are plain immutable Python objects; dictionaries and
arrays are never held in memory, but are written directly
through the slot builders in slots.py.
'''
from .pdfname import PdfName, Name
from .pdfstring import Str, HexStr
from .pdfindirect import Ref
from .pdfobject import Rect
from .slots import Any, Dict, Array, TypedArray

__all__ = """PdfName Name Str HexStr Ref Rect
             Any Dict Array TypedArray""".split()
