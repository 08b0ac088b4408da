# A part of pdfscribe, derived from pdfrw (https://github.com/pmaupin/pdfrw)
# Copyright (C) 2006-2017 Patrick Maupin, Austin, Texas
# MIT license -- See LICENSE.txt for details

'''
Slot builders for PDF values.

Nothing in this module keeps a PDF dictionary or array in memory.
Every value is written straight into the output buffer as soon as it
is known, so the only thing that has to be tracked is which value is
allowed to be written next.

An Any is a slot: the single position where the next value goes.
It is consumed exactly once, by writing a scalar into it with obj(),
or by turning it into a Dict or an Array.

Every slot and container has an owner -- the container it lives in,
or the PdfWriter for the body of an indirect object.  An owner has at
most one open child at a time.  When the owner is written to again
(next key, next item, next indirect object, or finish), the open child
is finalized first: its own open children are finalized depth-first,
its closing delimiter is written, and, for the outermost value of an
indirect object, the guard writes "endobj".  A child handle that is
used after its owner has moved on raises PdfStructureError.

Containers are also context managers, for callers that prefer to make
the end of a dictionary or array explicit:

    with writer.indirect(ref).dict() as page:
        page.pair(PdfName.Type, PdfName.Page)
        page.key(PdfName.MediaBox).array().items([0, 0, 595, 842])

A slot that was handed out by key() or any() and never written is a
bug in the calling code.  Normally that raises PdfStructureError when
the owner resumes.  When a with block is left because of an exception,
the slot is filled with null instead (and a warning is logged), so
the output is still well formed and the original exception wins.
'''

from .pdfname import Name
from ..errors import PdfStructureError, log


class Any(object):
    ''' A single, not yet written value position.

        Exactly one of obj(), dict() or array() may be called.
    '''

    def __init__(self, owner, indent=0, guard=None, label='value'):
        self.owner = owner
        self.buf = owner.buf
        self.fmt = owner.fmt
        self.indent = indent
        self.guard = guard
        self.label = label
        self.written = False
        owner.child = self

    def __repr__(self):
        return '<Any %s>' % self.label

    def _check(self):
        if self.written:
            raise PdfStructureError('%s was already written' % self.label)
        if self.owner.child is not self:
            raise PdfStructureError('%s is no longer open for writing'
                                    % self.label)

    def _finished(self):
        guard = self.guard
        if guard is not None:
            guard.finish()

    def obj(self, value):
        ''' Write a scalar value into the slot.
        '''
        self._check()
        data = self.fmt(value)
        self.written = True
        self.buf += data
        self._finished()

    def dict(self):
        ''' Turn the slot into a dictionary.
        '''
        self._check()
        self.written = True
        return Dict(self)

    def array(self):
        ''' Turn the slot into an array.
        '''
        self._check()
        self.written = True
        return Array(self)

    def _release(self, strict=True):
        if self.written:
            return
        if strict:
            raise PdfStructureError('%s was never written' % self.label)
        log.warning('%s was never written; writing null' % self.label)
        self.written = True
        self.buf += b'null'
        self._finished()


class _Container(object):
    ''' Common code for Dict and Array.  The opening delimiter
        is written on construction; the closing delimiter is
        written when the container is finalized.
    '''

    open_delim = b''

    def __init__(self, slot):
        owner = self.owner = slot.owner
        self.buf = slot.buf
        self.fmt = slot.fmt
        self.indent = slot.indent
        self.guard = slot.guard
        self.label = slot.label
        self.child = None
        self.closed = False
        self.count = 0
        owner.child = self
        self.buf += self.open_delim

    def __repr__(self):
        return '<%s %s>' % (type(self).__name__, self.label)

    def __len__(self):
        return self.count

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self._release(exc_type is None)

    def _resume(self):
        if self.closed:
            raise PdfStructureError('%s is already finished' % self.label)
        child = self.child
        if child is not None:
            child._release()
            self.child = None

    def _release(self, strict=True):
        if self.closed:
            return
        child = self.child
        if child is not None:
            child._release(strict)
            self.child = None
        self.closed = True
        self._close()
        guard = self.guard
        if guard is not None:
            guard.finish()

    def _close(self):
        raise NotImplementedError


class Dict(_Container):
    ''' A dictionary.  Entries are written in the order they
        are added, one per line.

        Keys are not checked for uniqueness; writing the same
        key twice produces a dictionary that PDF readers will
        interpret however they like.
    '''

    open_delim = b'<<'
    indent_width = 2

    def key(self, key):
        ''' Write a key and return the slot for its value.
        '''
        self._resume()
        key = Name(key)
        indent = self.indent + self.indent_width
        self.buf += b'\n' + b' ' * indent + self.fmt(key) + b' '
        self.count += 1
        return Any(self, indent,
                   label='%s /%s' % (self.label, key.decode('latin-1')))

    def pair(self, key, value):
        self.key(key).obj(value)
        return self

    def _close(self):
        if self.count:
            self.buf += b'\n' + b' ' * self.indent + b'>>'
        else:
            self.buf += b'>>'


class Array(_Container):
    ''' An array.  Items are written space-separated on one line.
    '''

    open_delim = b'['

    def _separate(self):
        if self.count:
            self.buf += b' '
        self.count += 1

    def item(self, value):
        self._resume()
        data = self.fmt(value)
        self._separate()
        self.buf += data
        return self

    def items(self, values):
        for value in values:
            self.item(value)
        return self

    def any(self):
        ''' Return the slot for a nested (non-scalar) item.
        '''
        self._resume()
        self._separate()
        return Any(self, self.indent,
                   label='%s[%d]' % (self.label, self.count - 1))

    def typed(self, kind):
        ''' Return a view of this array for appending items
            that are all of one type.
        '''
        self._resume()
        return TypedArray(self, kind)

    def _close(self):
        self.buf += b']'


class TypedArray(object):
    ''' A view on an Array where all the items have the same type,
        so the formatter only has to be looked up once.  Items that
        are not instances of the type are converted by calling it,
        e.g. ints appended to a float array are written as reals.
    '''

    def __init__(self, array, kind):
        self.array = array
        self.kind = kind
        self.handler = array.fmt[kind]

    def __len__(self):
        return len(self.array)

    def item(self, value, isinstance=isinstance):
        array = self.array
        array._resume()
        kind = self.kind
        if not isinstance(value, kind):
            value = kind(value)
        data = self.handler(value)
        array._separate()
        array.buf += data
        return self

    def items(self, values):
        for value in values:
            self.item(value)
        return self
