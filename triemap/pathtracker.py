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

VISIT = 0
BACKUP = 1


class PathTracker(object):
    """Depth first walk over a node graph without using the call stack

    The work stack holds two kinds of steps: VISIT appends a character to the
    path buffer and reports the node, and BACKUP drops the last character
    again. Each child gets a BACKUP step pushed beneath its VISIT step, so the
    whole subtree of a child is done before the path is unwound and the next
    sibling is visited.

    Iterating yields a (key, node) pair for every value-bearing node below
    and including the start node. Keys are the start path followed by the
    characters leading down from the start node.
    """

    def __init__(self, node, path=""):
        self.node = node
        self.path = path

    def _steps(self):
        # Yields the live path buffer, callers copy it if they keep it
        path = list(self.path)
        stack = [(VISIT, None, self.node)]
        while stack:
            action, char, node = stack.pop()
            if action == BACKUP:
                path.pop()
                continue
            if char is not None:
                path.append(char)
            yield path, char, node
            for key in node.getKeys():
                stack.append((BACKUP, None, None))
                stack.append((VISIT, key, node.getNext(key)))

    def __iter__(self):
        for path, char, node in self._steps():
            if node.hasValue():
                yield "".join(path), node

    def walk(self):
        """Yield a (depth, char, node) triple for every node, depth being
        the distance from the start node. char is None for the start node."""
        start = len(self.path)
        for path, char, node in self._steps():
            yield len(path) - start, char, node

    def keys(self):
        return set([key for key, node in self])
