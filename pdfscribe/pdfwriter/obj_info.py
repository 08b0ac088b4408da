# A part of pdfscribe, derived from pdfrw (https://github.com/pmaupin/pdfrw)
# Copyright (C) 2006-2017 Patrick Maupin, Austin, Texas
# MIT license -- See LICENSE.txt for details

"""
This module contains code to track indirect objects
(their file offsets) while they are being written.
"""

from ..errors import PdfOutputError, PdfStructureError


def get_obj_info(f_write, f_tell):
    """
        Parameters:
            f_write is the function to call to stream data out.
            f_tell is the function to call to get stream position

        Returns:

            IndirectGuard, StreamGuard, write_xref

            IndirectGuard is created when an indirect object is
            started.  It records the file offset of the object and
            writes the "obj" header; its finish() method writes
            "endobj" once the object's value has been written.

            StreamGuard is an IndirectGuard that also writes the
            stream data after the stream dictionary.

            write_xref will write the cross-reference table.
    """

    obj_offsets = {}

    class IndirectGuard(object):
        """
            Each indirect object gets exactly one guard, and each
            object number may only be started once per document.
        """
        __slots__ = ['ref']

        def __init__(self, ref):
            num = ref.num
            if num < 1:
                raise PdfOutputError('Invalid object number %d' % num)
            if num in obj_offsets:
                raise PdfStructureError('object %d %d was already written'
                                        % ref)
            obj_offsets[num] = f_tell(), ref.gen
            f_write(b'%d %d obj\n' % ref)
            self.ref = ref

        def finish(self):
            f_write(b'\nendobj\n\n')

    class StreamGuard(IndirectGuard):
        __slots__ = ['data']

        def __init__(self, ref, data):
            IndirectGuard.__init__(self, ref)
            self.data = data

        def finish(self):
            f_write(b'\nstream\n')
            f_write(self.data)
            f_write(b'\nendstream\nendobj\n\n')

    def write_xref(size):
        missing = [num for num in range(1, size) if num not in obj_offsets]
        if missing:
            raise PdfOutputError('Objects never written: %s'
                                 % ', '.join(str(num) for num in missing))
        xref_loc = f_tell()
        fmt = b'%010d %05d %s\r\n'
        f_write(b'xref\n0 %d\n' % size)
        f_write(fmt % (0, 65535, b'f'))
        for num in range(1, size):
            offset, gen = obj_offsets[num]
            f_write(fmt % (offset, gen, b'n'))
        return xref_loc

    return IndirectGuard, StreamGuard, write_xref
