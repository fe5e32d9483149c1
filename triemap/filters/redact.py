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

from . import base
from ..constants import InvalidArgument


class Filter(base.Filter):
    """Redacts stored keys out of the text tokens of a token stream

    Tokens are dicts with a "type" and a "data" entry. The data of
    "Characters" tokens is passed through Trie.filter; every other token is
    yielded unchanged.
    """

    textTokenTypes = frozenset(["Characters"])

    def __init__(self, source, trie, replacement="***"):
        base.Filter.__init__(self, source)
        if trie is None:
            raise InvalidArgument("Trie can not be null")
        self.trie = trie
        self.replacement = replacement

    def __iter__(self):
        for token in base.Filter.__iter__(self):
            if token["type"] in self.textTokenTypes and token["data"]:
                token["data"] = self.trie.filter(token["data"], self.replacement)
            yield token
