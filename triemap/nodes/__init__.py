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

"""Interchangeable node storage layouts for Trie.

To add a new layout, create a module defining two things:

1) A Node class inheriting from nodes.base.Node. It has to implement the
child related part of the node interface: getNext, setNext, removeNext,
getKeys and hasChildren. Value and size bookkeeping is inherited.

2) A node factory (called NodeFactory by convention) inheriting from
nodes.base.NodeFactory, with nodeClass set to the Node class. Override
createNode if the nodes need constructor arguments, and validateKey if some
keys can not be stored by the layout.
"""

from ..constants import nodeTypes

__all__ = ["getNodeFactory", "defaultNodeType"]

defaultNodeType = "hashed"

nodeFactoryCache = {}


def getNodeFactory(nodeType=None):
    """Get a NodeFactory class for one of the built-in node layouts

    nodeType - the name of the layout required (case-insensitive). Supported
               values are:

               "hashed" - children stored in a dict. Accepts any character.
               "array" - children stored in a list indexed by a fixed
                         alphabet, printable ASCII unless the factory is
                         given another one.
               "tst" - children stored as a ternary search tree of split
                       characters. Accepts any character.

    Defaults to defaultNodeType."""

    if nodeType is None:
        nodeType = defaultNodeType
    nodeType = nodeType.lower()
    if nodeType not in nodeTypes:
        raise ValueError("""Unrecognised node type "%s" """ % nodeType)
    if nodeType not in nodeFactoryCache:
        if nodeType == "hashed":
            from . import hashed
            nodeFactoryCache[nodeType] = hashed.NodeFactory
        elif nodeType == "array":
            from . import array
            nodeFactoryCache[nodeType] = array.NodeFactory
        elif nodeType == "tst":
            from . import tst
            nodeFactoryCache[nodeType] = tst.NodeFactory
    return nodeFactoryCache[nodeType]
