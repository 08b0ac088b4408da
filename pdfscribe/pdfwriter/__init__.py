# A part of pdfscribe, derived from pdfrw (https://github.com/pmaupin/pdfrw)
# Copyright (C) 2006-2017 Patrick Maupin, Austin, Texas
# MIT license -- See LICENSE.txt for details

"""
The PdfWriter class writes a PDF file one indirect object at a time.

Unlike a serializer that walks a finished object tree, PdfWriter
never holds the document in memory.  Client code allocates references,
opens the body of one indirect object at a time, and fills it in
through the slot builders; the bytes go straight into the output
buffer.  finish() then appends the cross-reference table and the
trailer.

    writer = PdfWriter()
    catalog, pages = writer.alloc(), writer.alloc()
    writer.indirect(catalog).dict() \\
        .pair(PdfName.Type, PdfName.Catalog) \\
        .pair(PdfName.Pages, pages)
    ...
    writer.write('out.pdf', catalog)

Only one indirect object is open at a time.  Starting the next one
(or calling finish) completes the previous one.
"""

from .formatter import FormatHandlers
from .obj_info import get_obj_info

from ..objects import Any, PdfName, Ref
from ..errors import PdfOutputError
from ..font import Type1Font, Type0Font, CIDFont, FontDescriptor
from ..cmap import write_cmap


class PdfWriter(object):
    """
        The writer is the owner of the top-level objects:  it hands
        out references, starts indirect objects and streams, and
        knows where each of them starts in the output.
    """

    # These could be overridden before instantiation, or by
    # passing new values to init.
    version = '1.7'
    Formatter = FormatHandlers

    child = None
    buf = None

    def __init__(self, version=None, **kwargs):
        """
            Parameters:
                version -- PDF version for the file header.

                **kwargs -- allows class attributes to be overridden without
                            writing a subclass.
        """
        if version is not None:
            self.version = version

        if kwargs:
            for name, value in kwargs.items():
                if name not in self.replaceable:
                    raise ValueError("Cannot set attribute %s "
                                     "on PdfWriter instance" % name)
                setattr(self, name, value)

        buf = self.buf = bytearray()
        self.fmt = self.Formatter.formatter()
        self.next_num = 1
        stuff = get_obj_info(buf.extend, buf.__len__)
        (self.IndirectGuard, self.StreamGuard, self.write_xref) = stuff
        buf += ('%%PDF-%s\n' % self.version).encode('latin-1')
        buf += b'%\xe2\xe3\xcf\xd3\n\n'

    def _resume(self):
        if self.buf is None:
            raise PdfOutputError('PdfWriter is already finished')
        child = self.child
        if child is not None:
            # An abandoned slot stays attached when this raises
            child._release()
            self.child = None

    def _claim(self, ref):
        # Never hand out a number the caller already used
        if ref.num >= self.next_num:
            self.next_num = ref.num + 1

    def alloc(self):
        """ Return a new, never used reference.
        """
        if self.buf is None:
            raise PdfOutputError('PdfWriter is already finished')
        ref = Ref(self.next_num)
        self.next_num += 1
        return ref

    def indirect(self, ref):
        """ Start indirect object ref, and return the slot for its value.
        """
        self._resume()
        guard = self.IndirectGuard(ref)
        self._claim(ref)
        return Any(self, guard=guard, label='object %d %d' % ref)

    def stream(self, ref, data):
        """ Start stream object ref, and return its dictionary,
            with /Length already filled in.  The data is written
            after the dictionary is finished.
        """
        self._resume()
        data = bytes(data)
        guard = self.StreamGuard(ref, data)
        self._claim(ref)
        slot = Any(self, guard=guard, label='stream %d %d' % ref)
        return slot.dict().pair(PdfName.Length, len(data))

    def type1_font(self, ref):
        return Type1Font.start(self.indirect(ref))

    def type0_font(self, ref):
        return Type0Font.start(self.indirect(ref))

    def cid_font(self, ref, subtype):
        return CIDFont.start(self.indirect(ref), subtype)

    def font_descriptor(self, ref):
        return FontDescriptor.start(self.indirect(ref))

    def cmap(self, ref, name, info, mapping):
        write_cmap(self, ref, name, info, mapping)
        return self

    def finish(self, catalog, info=None):
        """
            Complete any open object, write the cross-reference
            table and the trailer, and return the whole file.

            Every object number from 1 up to the highest one that
            was allocated or written must have been written.
        """
        self._resume()
        buf = self.buf
        size = self.next_num
        xref_loc = self.write_xref(size)
        buf += b'trailer\n'
        trailer = Any(self, label='trailer').dict()
        trailer.pair(PdfName.Size, size).pair(PdfName.Root, catalog)
        if info is not None:
            trailer.pair(PdfName.Info, info)
        self._resume()
        buf += b'\nstartxref\n%d\n%%%%EOF\n' % xref_loc
        self.buf = None
        return bytes(buf)

    def write(self, fname, catalog, info=None):
        """
            finish() the file, and write it to fname, which is
            either a file name or a binary file-like object.
        """
        data = self.finish(catalog, info)

        # We either have a filename or a preexisting file object.
        preexisting = hasattr(fname, 'write')
        f = preexisting and fname or open(fname, 'wb')
        try:
            f.write(data)
        finally:
            if not preexisting:
                f.close()

    # Attributes can be aliased on initialization
    replaceable = set(vars())
