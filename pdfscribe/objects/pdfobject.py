# A part of pdfscribe, derived from pdfrw (https://github.com/pmaupin/pdfrw)
# Copyright (C) 2006-2017 Patrick Maupin, Austin, Texas
# MIT license -- See LICENSE.txt for details

from collections import namedtuple


class Rect(namedtuple('Rect', 'x1 y1 x2 y2')):
    ''' A rectangle, given by its lower-left (x1, y1) and
        upper-right (x2, y2) corners.  It is written out as
        an array of four numbers.
    '''
    __slots__ = ()
