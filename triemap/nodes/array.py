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
from ..constants import InvalidArgument, asciiPrintable

defaultAlphabet = asciiPrintable


class Node(base.Node):
    """Node keeping its children in a fixed-size list

    Slot i holds the child for the i-th character of the factory alphabet.
    """

    __slots__ = ("children", "indexes", "alphabet", "count")

    def __init__(self, indexes, alphabet):
        base.Node.__init__(self)
        self.indexes = indexes
        self.alphabet = alphabet
        self.children = [None] * len(alphabet)
        self.count = 0

    def getNext(self, c):
        index = self.indexes.get(c)
        if index is None:
            return None
        return self.children[index]

    def setNext(self, c, node):
        index = self.indexes.get(c)
        if index is None:
            raise InvalidArgument("Character %r is not in the node alphabet" % c)
        if self.children[index] is None:
            self.count += 1
        self.children[index] = node

    def removeNext(self, c):
        index = self.indexes.get(c)
        if index is None or self.children[index] is None:
            return
        self.children[index] = None
        self.count -= 1

    def getKeys(self):
        return [self.alphabet[i] for i, child in enumerate(self.children)
                if child is not None]

    def hasChildren(self):
        return self.count > 0


class NodeFactory(base.NodeFactory):
    """Creates array nodes over a fixed alphabet

    alphabet - A string of the distinct characters keys may contain. Defaults
    to printable ASCII.
    """

    nodeClass = Node

    def __init__(self, alphabet=None):
        if alphabet is None:
            alphabet = defaultAlphabet
        if not alphabet:
            raise InvalidArgument("Alphabet must not be empty")
        if len(set(alphabet)) != len(alphabet):
            raise InvalidArgument("Alphabet characters must be unique")
        self.alphabet = alphabet
        self.indexes = dict([(c, i) for i, c in enumerate(alphabet)])

    def createNode(self):
        return self.nodeClass(self.indexes, self.alphabet)

    def validateKey(self, key):
        for c in key:
            if c not in self.indexes:
                raise InvalidArgument("Character %r is not in the node alphabet" % c)
