# A part of pdfscribe, derived from pdfrw (https://github.com/pmaupin/pdfrw)
# Copyright (C) 2006-2017 Patrick Maupin, Austin, Texas
# MIT license -- See LICENSE.txt for details

from operator import itemgetter


class Ref(tuple):
    ''' A reference to an indirect object.
        The object itself is the (object number, generation number) tuple,
        so two references compare and hash equal exactly when they name
        the same object.  References are handed out by PdfWriter.alloc()
        and are never reused within one document.
    '''

    def __new__(cls, num, gen=0, new=tuple.__new__):
        return new(cls, (num, gen))

    num = property(itemgetter(0))
    gen = property(itemgetter(1))

    def __repr__(self):
        return 'Ref(%d, %d)' % self

    def encoded(self):
        return b'%d %d R' % self
