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

"""Ternary search tree node layout.

The edges leaving a node are kept in a binary search tree of split
characters. Each cell has a lo and a hi sibling and an eq pointer to the
child node reached through its character, so following eq pointers walks
down the trie and following lo/hi pointers walks across siblings.
"""

from . import base


class Cell(object):
    __slots__ = ("char", "eq", "lo", "hi")

    def __init__(self, char, eq):
        self.char = char
        self.eq = eq
        self.lo = None
        self.hi = None


class Node(base.Node):
    __slots__ = ("root", "count")

    def __init__(self):
        base.Node.__init__(self)
        self.root = None
        self.count = 0

    def getNext(self, c):
        cell = self.root
        while cell is not None:
            if c < cell.char:
                cell = cell.lo
            elif c > cell.char:
                cell = cell.hi
            else:
                return cell.eq
        return None

    def setNext(self, c, node):
        if self.root is None:
            self.root = Cell(c, node)
            self.count = 1
            return
        cell = self.root
        while True:
            if c < cell.char:
                if cell.lo is None:
                    cell.lo = Cell(c, node)
                    break
                cell = cell.lo
            elif c > cell.char:
                if cell.hi is None:
                    cell.hi = Cell(c, node)
                    break
                cell = cell.hi
            else:
                cell.eq = node
                return
        self.count += 1

    def removeNext(self, c):
        parent = None
        cell = self.root
        while cell is not None and cell.char != c:
            parent = cell
            cell = cell.lo if c < cell.char else cell.hi
        if cell is None:
            return

        if cell.lo is not None and cell.hi is not None:
            # Replace with the in-order successor, which has no lo sibling
            successorParent = cell
            successor = cell.hi
            while successor.lo is not None:
                successorParent = successor
                successor = successor.lo
            cell.char = successor.char
            cell.eq = successor.eq
            if successorParent is cell:
                successorParent.hi = successor.hi
            else:
                successorParent.lo = successor.hi
        else:
            replacement = cell.lo if cell.lo is not None else cell.hi
            if parent is None:
                self.root = replacement
            elif parent.lo is cell:
                parent.lo = replacement
            else:
                parent.hi = replacement
        self.count -= 1

    def getKeys(self):
        keys = []
        stack = []
        cell = self.root
        while stack or cell is not None:
            while cell is not None:
                stack.append(cell)
                cell = cell.lo
            cell = stack.pop()
            keys.append(cell.char)
            cell = cell.hi
        return keys

    def hasChildren(self):
        return self.root is not None


class NodeFactory(base.NodeFactory):
    nodeClass = Node
