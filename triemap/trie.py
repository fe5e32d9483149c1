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

from collections.abc import MutableMapping

from . import nodes
from ._utils import isSymbol, isValidKey, notEmpty, notNull
from .constants import keyErrorMessage
from .pathtracker import PathTracker

__all__ = ["Trie"]


class Trie(MutableMapping):
    """Map of string keys built as a prefix tree

    Besides exact lookups the trie answers longest prefix queries and can
    redact stored keys out of text. Every walk is iterative, so the length
    of a key is not limited by the recursion limit.

    Missing keys are reported as None by get, prefix, prefixKey and remove,
    and as KeyError by the mapping protocol.
    """

    def __init__(self, data=None, nodeFactory=None, **kwargs):
        """
        data - an optional mapping of initial entries
        nodeFactory - a NodeFactory class, or the name of one of the built-in
                      node layouts (see nodes.getNodeFactory)
        kwargs - passed to the node factory constructor
        """
        if nodeFactory is None or isinstance(nodeFactory, str):
            nodeFactory = nodes.getNodeFactory(nodeFactory)
        self.nodeFactory = nodeFactory(**kwargs)
        self.root = self.nodeFactory.createNode()
        if data is not None:
            self.putAll(data)

    def isEmpty(self):
        return self.size() == 0

    def size(self):
        return self.root.getSize()

    def put(self, key, value):
        """Store value under key

        Returns the value previously stored under key, or None if the key is
        new. Replacing a value leaves the size unchanged."""
        notEmpty(key, keyErrorMessage)
        self.nodeFactory.validateKey(key)

        node = self.root
        stack = [node]
        for c in key:
            child = node.getNext(c)
            if child is None:
                child = self.nodeFactory.createNode()
                node.setNext(c, child)
            node = child
            stack.append(node)

        replaced = node.hasValue()
        old = node.getValue()
        node.setValue(value)
        if replaced:
            return old

        while stack:
            node = stack.pop()
            node.setSize(node.getSize() + 1)
        return None

    def putAll(self, entries):
        notNull(entries, "Map can not be null")
        for key, value in entries.items():
            self.put(key, value)

    def get(self, key, default=None):
        notEmpty(key, keyErrorMessage)
        node = self._getNode(key)
        if node is None or not node.hasValue():
            return default
        return node.getValue()

    def containsKey(self, key):
        notEmpty(key, keyErrorMessage)
        node = self._getNode(key)
        return node is not None and node.hasValue()

    def prefix(self, key):
        """Return the value of the longest stored key that is a prefix of
        key, or None"""
        notEmpty(key, keyErrorMessage)

        value = None
        node = self.root
        index = 0
        while node is not None:
            if node.hasValue():
                value = node.getValue()
            if index == len(key):
                break
            node = node.getNext(key[index])
            index += 1
        return value

    def prefixKey(self, key):
        """Return the longest stored key that is a prefix of key, or None"""
        notEmpty(key, keyErrorMessage)

        longestPrefix = -1
        node = self.root
        index = 0
        while node is not None:
            if node.hasValue():
                longestPrefix = index
            if index == len(key):
                break
            node = node.getNext(key[index])
            index += 1
        if longestPrefix == -1:
            return None
        return key[:longestPrefix]

    def remove(self, key):
        """Remove key and return its value, or None if it was not stored

        Nodes left without a value and without children are detached on the
        way back to the root."""
        notEmpty(key, keyErrorMessage)

        node = self.root
        stack = []
        for c in key:
            stack.append(node)
            node = node.getNext(c)
            if node is None:
                return None
        if not node.hasValue():
            return None

        value = node.getValue()
        node.setSize(node.getSize() - 1)
        node.removeValue()

        index = len(key) - 1
        while stack:
            c = key[index]
            node = stack.pop()
            if node.getNext(c).isEmpty():
                node.removeNext(c)
            node.setSize(node.getSize() - 1)
            index -= 1
        return value

    def keySet(self):
        return PathTracker(self.root).keys()

    def filter(self, text, replacement):
        """Replace every stored key found in text with replacement

        Only letters and CJK ideographs take part in a match; any other
        character is copied through. Symbols met while a match is in progress
        are skipped over, so "b.a.d" is redacted when "bad" is stored. A
        failed match restarts one character after the point it began."""
        notNull(text, "Text can not be null")
        notNull(replacement, "Replacement can not be null")

        result = []
        root = self.root
        node = root
        begin = 0
        position = 0
        while position < len(text):
            c = text[position]
            if isSymbol(c):
                if node is root:
                    result.append(c)
                    begin += 1
                position += 1
                continue
            node = node.getNext(c)
            if node is None:
                result.append(text[begin])
                begin += 1
                position = begin
                node = root
            elif node.hasValue():
                result.append(replacement)
                position += 1
                begin = position
                node = root
            else:
                position += 1
        result.append(text[begin:])
        return "".join(result)

    # Prefix queries

    def keys(self, prefix=None):
        """Return the set of stored keys, limited to those starting with
        prefix if one is given"""
        if prefix is None or prefix == "":
            return self.keySet()
        notEmpty(prefix, keyErrorMessage)
        node = self._getNode(prefix)
        if node is None:
            return set()
        return PathTracker(node, prefix).keys()

    def has_keys_with_prefix(self, prefix):
        if prefix is None or prefix == "":
            return not self.isEmpty()
        notEmpty(prefix, keyErrorMessage)
        node = self._getNode(prefix)
        return node is not None and node.getSize() > 0

    def longest_prefix(self, prefix):
        key = self.prefixKey(prefix)
        if key is None:
            raise KeyError(prefix)
        return key

    def longest_prefix_item(self, prefix):
        lprefix = self.longest_prefix(prefix)
        return (lprefix, self[lprefix])

    def pprint(self):
        """Return a text rendering of the node graph, one line per edge

        Each line shows the edge character, its size counter and, for nodes
        holding a value, the value."""
        rv = []
        for depth, char, node in PathTracker(self.root).walk():
            if char is None:
                rv.append("#root size=%d" % node.getSize())
                continue
            line = "|%s%r size=%d" % ("  " * depth, char, node.getSize())
            if node.hasValue():
                line += " value=%r" % (node.getValue(),)
            rv.append(line)
        return "\n".join(rv)

    # Mapping protocol

    def __getitem__(self, key):
        notEmpty(key, keyErrorMessage)
        node = self._getNode(key)
        if node is None or not node.hasValue():
            raise KeyError(key)
        return node.getValue()

    def __setitem__(self, key, value):
        self.put(key, value)

    def __delitem__(self, key):
        if not self.containsKey(key):
            raise KeyError(key)
        self.remove(key)

    def __contains__(self, key):
        if not isValidKey(key):
            return False
        return self.containsKey(key)

    def __iter__(self):
        return iter(self.keySet())

    def clear(self):
        self.root = self.nodeFactory.createNode()

    def popitem(self):
        """Remove and return some (key, value) pair, raising KeyError if the
        trie is empty"""
        for key, node in PathTracker(self.root):
            value = node.getValue()
            self.remove(key)
            return (key, value)
        raise KeyError("popitem(): trie is empty")

    def __len__(self):
        return self.size()

    def __repr__(self):
        return "<%s size=%d>" % (self.__class__.__name__, self.size())

    def _getNode(self, key):
        node = self.root
        index = 0
        while node is not None:
            if index == len(key):
                return node
            node = node.getNext(key[index])
            index += 1
        return None
