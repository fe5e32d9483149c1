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

"""
Prefix tree map with longest prefix lookups and keyword redaction.

Example usage:

    import triemap
    routes = triemap.Trie({"/api/": "api", "/api/users/": "users"})
    routes.prefixKey("/api/users/42")    # "/api/users/"
    routes.prefix("/api/status")         # "api"

    words = triemap.Trie({"bad": True}, nodeFactory="tst")
    words.filter("this is bad word", "***")   # "this is *** word"
"""

from .constants import DataLossWarning, InvalidArgument
from .encoding import redactBytes
from .nodes import getNodeFactory
from .trie import Trie

__all__ = ["Trie", "getNodeFactory", "redactBytes", "InvalidArgument",
           "DataLossWarning"]

__version__ = "1.0.0"
