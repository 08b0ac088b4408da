# A part of pdfscribe, derived from pdfrw (https://github.com/pmaupin/pdfrw)
# Copyright (C) 2006-2017 Patrick Maupin, Austin, Texas
# MIT license -- See LICENSE.txt for details

'''
Character map (CMap) streams.

A CMap is a small PostScript resource embedded in the PDF as a
stream.  The one written here maps two-byte character codes to
Unicode, which is what a /ToUnicode entry needs.  The layout follows
Adobe technical note #5014 (CIDFont specification) and #5099 (CMap
and CIDFont files), and has to be byte-exact for PDF readers, so it
is written out by hand instead of with the Dict builders.
'''

from .objects import PdfName, Name
from .pdfwriter.formatter import format_name, format_int


def _utf16_hex(char):
    if isinstance(char, int):
        char = chr(char)
    # 4 hex digits in the BMP, 8 (a surrogate pair) above it
    return char.encode('utf-16-be', 'surrogatepass').hex().upper().encode()


def write_cmap(writer, ref, name, info, mapping):
    ''' Write a CMap stream as indirect object ref.

        Parameters:
            writer -- the PdfWriter
            ref -- the Ref of the stream object
            name -- the CMap name, e.g. 'Custom'
            info -- the SystemInfo of the character collection
            mapping -- a sized collection of (code, char) pairs,
                       code a 16 bit int, char a one-character str

        len(mapping) is written as the count of mappings without
        checking it against the number of pairs.
    '''
    name = Name(name)
    supplement = format_int(info.supplement)
    buf = bytearray()

    # Static header.
    buf += b'%!PS-Adobe-3.0 Resource-CMap\n'
    buf += b'%%DocumentNeededResources: procset CIDInit\n'
    buf += b'%%IncludeResource: procset CIDInit\n'

    # Dynamic header.
    buf += b'%%BeginResource: CMap ' + name + b'\n'
    buf += b'%%Title: (' + b' '.join(
        [name, info.registry, info.ordering, supplement]) + b')\n'
    buf += b'%%Version: 1\n'
    buf += b'%%EndComments\n'

    # General body.
    buf += b'/CIDInit /ProcSet findresource begin\n'
    buf += b'9 dict begin\n'
    buf += b'begincmap\n'
    buf += b'/CIDSystemInfo 3 dict dup begin\n'
    buf += b'    /Registry ' + info.registry.encoded() + b' def\n'
    buf += b'    /Ordering ' + info.ordering.encoded() + b' def\n'
    buf += b'    /Supplement ' + supplement + b' def\n'
    buf += b'end def\n'
    buf += b'/CMapName ' + format_name(name) + b' def\n'
    buf += b'/CMapVersion 1 def\n'
    buf += b'/CMapType 0 def\n'

    # The whole two-byte code space.
    buf += b'1 begincodespacerange\n'
    buf += b'<0000> <ffff>\n'
    buf += b'endcodespacerange\n'

    # The mappings.
    buf += format_int(len(mapping)) + b' beginbfchar\n'
    for code, char in mapping:
        buf += b'<%04X> <%s>\n' % (code, _utf16_hex(char))
    buf += b'endbfchar\n'

    # End of body.
    buf += b'endcmap\n'
    buf += b'CMapName currentdict /CMap defineresource pop\n'
    buf += b'end\n'
    buf += b'end\n'
    buf += b'%%EndResource\n'
    buf += b'%%EOF'

    with writer.stream(ref, buf) as dict:
        dict.pair(PdfName.Type, PdfName.CMap)
        dict.pair(PdfName.CMapName, name)
        info.write(dict.key(PdfName.CIDSystemInfo))
