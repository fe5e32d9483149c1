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

# Code points treated as matchable "word" characters by Trie.filter. Every
# other character is a symbol and is copied through unchanged.
wordCharacterRanges = (
    (0x2E80, 0x9FFF),  # CJK radicals through unified ideographs
    (0x41, 0x5A),      # A-Z
    (0x61, 0x7A),      # a-z
)

asciiPrintable = "".join([chr(c) for c in range(0x20, 0x7F)])

nodeTypes = frozenset(["hashed", "array", "tst"])

keyErrorMessage = "Key must be not null or not empty string."


class InvalidArgument(ValueError):
    """Raised when a caller passes a key, mapping or text the trie can not
    accept"""
    pass


class DataLossWarning(UserWarning):
    """Raised when the current input can not be represented losslessly"""
    pass
