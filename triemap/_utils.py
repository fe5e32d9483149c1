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

from .constants import InvalidArgument, wordCharacterRanges

__all__ = ["isSymbol", "isValidKey", "notNull", "notEmpty"]


def isSymbol(c):
    """Return True if the character c can never take part in a match"""
    codepoint = ord(c)
    for low, high in wordCharacterRanges:
        if low <= codepoint <= high:
            return False
    return True


def isValidKey(value):
    return isinstance(value, str) and len(value) > 0


def notNull(value, message):
    if value is None:
        raise InvalidArgument(message)


def notEmpty(value, message):
    notNull(value, message)
    if not isinstance(value, str):
        raise InvalidArgument("%s Got %s" % (message, type(value).__name__))
    if not value:
        raise InvalidArgument(message)
