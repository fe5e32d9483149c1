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

__all__ = ["Node", "NodeFactory", "NO_VALUE"]

# Marks a node that does not terminate a key. None is a legal value.
NO_VALUE = object()


class Node(object):
    """A single position in the trie

    value - The payload stored if this position completes a key
    size - The number of value-bearing nodes in the subtree rooted here,
    this node included

    Subclasses decide how the outgoing edges are stored and must implement
    getNext, setNext, removeNext, getKeys and hasChildren.
    """

    __slots__ = ("_value", "_size")

    def __init__(self):
        self._value = NO_VALUE
        self._size = 0

    def __repr__(self):
        return "<%s size=%d value=%r>" % (self.__class__.__name__, self._size,
                                           self.getValue())

    def getValue(self):
        """Return the stored value, or None if the node holds none"""
        if self._value is NO_VALUE:
            return None
        return self._value

    def setValue(self, value):
        self._value = value

    def hasValue(self):
        return self._value is not NO_VALUE

    def removeValue(self):
        self._value = NO_VALUE

    def getSize(self):
        return self._size

    def setSize(self, size):
        self._size = size

    def isEmpty(self):
        """Return true if the node holds no value and has no children"""
        return not self.hasValue() and not self.hasChildren()

    def getNext(self, c):
        """Return the child reached through character c, or None"""
        raise NotImplementedError

    def setNext(self, c, node):
        """Attach node as the child reached through character c, replacing
        any existing child for c"""
        raise NotImplementedError

    def removeNext(self, c):
        """Detach the child reached through character c if there is one"""
        raise NotImplementedError

    def getKeys(self):
        """Return a list of the characters that have a child"""
        raise NotImplementedError

    def hasChildren(self):
        raise NotImplementedError


class NodeFactory(object):
    """Creates empty nodes for a Trie

    Subclasses set nodeClass, and may override validateKey to reject keys
    their node layout can not store.
    """

    nodeClass = None

    def createNode(self):
        return self.nodeClass()

    def validateKey(self, key):
        pass
