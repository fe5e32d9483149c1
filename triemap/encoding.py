# Copyright (c) 2006-2013 James Graham and other contributors
#
# Permission is hereby granted, free of charge, to any person obtaining
# a copy of this software and associated documentation files (the
# "Software"), to deal in the Software without restriction, including
# without limitation the rights to use, copy, modify, merge, publish,
# distribute, sublicense, and/or sell copies of the Software, and to
# permit persons to whom the Software is furnished to do so, subject to
# the following conditions:
#
# The above copyright notice and this permission notice shall be
# included in all copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND,
# EXPRESS OR IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF
# MERCHANTABILITY, FITNESS FOR A PARTICULAR PURPOSE AND
# NONINFRINGEMENT. IN NO EVENT SHALL THE AUTHORS OR COPYRIGHT HOLDERS BE
# LIABLE FOR ANY CLAIM, DAMAGES OR OTHER LIABILITY, WHETHER IN AN ACTION
# OF CONTRACT, TORT OR OTHERWISE, ARISING FROM, OUT OF OR IN CONNECTION
# WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE SOFTWARE.

import warnings

import webencodings

from ._utils import notNull
from .constants import DataLossWarning

__all__ = ["redactBytes", "defaultEncoding"]

defaultEncoding = "utf-8"


def lookupEncoding(encoding):
    """Return the webencodings Encoding for a label, raising LookupError if
    the label is unknown"""
    if isinstance(encoding, webencodings.Encoding):
        return encoding
    rv = webencodings.lookup(encoding)
    if rv is None:
        raise LookupError("Unknown encoding label: %r" % (encoding,))
    return rv


def redactBytes(trie, data, replacement, encoding=None):
    """Redact stored keys out of an encoded payload

    trie - the Trie holding the keys to redact
    data - the payload as bytes
    replacement - the text each match is replaced with
    encoding - the label of the payload encoding, used when the payload does
               not start with a byte order mark. Defaults to defaultEncoding.

    Returns a (bytes, encodingName) tuple; the output is encoded in the
    encoding the input was decoded with. Bytes that do not decode are
    replaced with U+FFFD, and characters the output encoding can not
    represent are replaced with "?"; either issues a DataLossWarning."""
    notNull(trie, "Trie can not be null")
    notNull(data, "Data can not be null")
    if encoding is None:
        encoding = defaultEncoding
    fallback = lookupEncoding(encoding)

    try:
        text, used = webencodings.decode(data, fallback, errors="strict")
    except UnicodeDecodeError:
        warnings.warn("Input is not valid %s, undecodable bytes were replaced" %
                      fallback.name, DataLossWarning)
        text, used = webencodings.decode(data, fallback, errors="replace")

    redacted = trie.filter(text, replacement)
    try:
        rv = webencodings.encode(redacted, used)
    except UnicodeEncodeError:
        warnings.warn("Output can not be represented in %s, characters were "
                      "replaced" % used.name, DataLossWarning)
        rv = webencodings.encode(redacted, used, errors="replace")
    return rv, used.name
