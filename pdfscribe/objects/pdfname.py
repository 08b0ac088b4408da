# A part of pdfscribe, derived from pdfrw (https://github.com/pmaupin/pdfrw)
# Copyright (C) 2006-2017 Patrick Maupin, Austin, Texas
# MIT license -- See LICENSE.txt for details


class Name(bytes):
    ''' A Name is an identifier that is written out with
        a leading slash.

        Names are not escaped on output.  It is up to the
        caller to make sure there is no whitespace or delimiter
        character inside a name; if there is, the output will
        simply be malformed.

        A Name may be built from bytes, or from a str, in
        which case it is encoded as Latin-1.
    '''

    def __new__(cls, name, new=bytes.__new__):
        if isinstance(name, str):
            name = name.encode('latin-1')
        elif not isinstance(name, bytes):
            raise TypeError('Cannot make a Name from %s'
                            % type(name).__name__)
        return new(cls, name)

    def __repr__(self):
        return 'Name(%r)' % bytes(self)


# We could have used a metaclass, but this matches what
# pdfrw was doing historically.

class PdfName(object):
    ''' Two simple ways to get a PDF name from a string:

                x = PdfName.FooBar
                x = PdfName('Foo-Bar')

        Either technique will return Name(b'FooBar'),
        which is written out as "/FooBar"
    '''

    def __getattr__(self, name, Name=Name):
        return Name(name)

    def __call__(self, name, Name=Name):
        return Name(name)

PdfName = PdfName()
