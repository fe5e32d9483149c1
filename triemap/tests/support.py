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

from triemap.pathtracker import PathTracker

routeKeys = frozenset([
    "/uaa/**",
    "/user/**",
    "/account/**",
    "/api/**",
    "/notifications/**",
    "/ws/**",
])


def checkInvariants(trie):
    """Assert every size counter matches the number of stored keys below it
    and no empty node other than the root is kept"""
    stored = trie.keySet()
    expected = {}
    for key in stored:
        for i in range(len(key) + 1):
            expected[key[:i]] = expected.get(key[:i], 0) + 1

    path = []
    seen = 0
    for depth, char, node in PathTracker(trie.root).walk():
        if char is not None:
            del path[depth - 1:]
            path.append(char)
            assert not node.isEmpty(), "".join(path)
        key = "".join(path)
        assert node.getSize() == expected.get(key, 0), key
        seen += 1
    assert seen == len(expected) or not stored
    assert trie.size() == len(stored)
