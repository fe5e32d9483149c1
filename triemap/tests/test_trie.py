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

import random

import pytest

from triemap import InvalidArgument, Trie

from . import support


def test_empty(nodeType):
    trie = Trie(nodeFactory=nodeType)
    assert trie.isEmpty()
    assert trie.size() == 0
    assert trie.keySet() == set()


def test_size(trie):
    assert trie.size() == len(support.routeKeys)
    assert not trie.isEmpty()
    support.checkInvariants(trie)


def test_duplicates_do_not_alter_size(trie):
    for key in support.routeKeys:
        assert trie.put(key, key) == key
    assert trie.size() == len(support.routeKeys)
    support.checkInvariants(trie)


def test_putAll(nodeType):
    trie = Trie(nodeFactory=nodeType)
    trie.putAll(dict([(key, key) for key in support.routeKeys]))
    for key in support.routeKeys:
        assert trie.get(key) == key


def test_get(trie):
    for key in support.routeKeys:
        assert trie.get(key) == key
        assert trie.containsKey(key)


def test_get_missing(trie):
    assert trie.get("/uaa") is None
    assert trie.get("/uaa/**/more") is None
    assert trie.get("/nowhere") is None
    assert not trie.containsKey("/uaa")


def test_prefixKey_of_stored_keys(trie):
    for key in support.routeKeys:
        assert trie.prefixKey(key) == key
        assert trie.prefix(key) == key


def test_prefixKey_longer_query(trie):
    assert trie.prefixKey("/uaa/**/login") == "/uaa/**"
    assert trie.prefix("/uaa/**/login") == "/uaa/**"


def test_prefixKey_no_match(trie):
    assert trie.prefixKey("/nowhere") is None
    assert trie.prefix("/nowhere") is None
    assert trie.prefixKey("/ua") is None


def test_prefix_picks_longest(nodeType):
    trie = Trie({"/api": "short", "/api/**": "long"}, nodeFactory=nodeType)
    assert trie.prefix("/api/**") == "long"
    assert trie.prefix("/apix") == "short"
    assert trie.prefixKey("/api/x") == "/api"
    assert trie.prefixKey("/api/**/x") == "/api/**"


def test_replace_values(trie):
    for key in support.routeKeys:
        assert trie.put(key, "replaced") == key
    for key in support.routeKeys:
        assert trie.get(key) == "replaced"
    assert trie.size() == len(support.routeKeys)


def test_remove_all(trie):
    for key in support.routeKeys:
        assert trie.remove(key) == key
    assert trie.isEmpty()
    assert trie.size() == 0
    for key in support.routeKeys:
        assert trie.get(key) is None
    assert not trie.root.hasChildren()


def test_remove_scenario(nodeType):
    trie = Trie(nodeFactory=nodeType)
    for key in ["/uaa/**", "/user/**", "/api/**"]:
        trie.put(key, key)
    assert trie.prefixKey("/uaa/**") == "/uaa/**"
    assert trie.prefix("/uaa/**") == "/uaa/**"
    size = trie.size()
    assert trie.remove("/uaa/**") == "/uaa/**"
    assert trie.get("/uaa/**") is None
    assert trie.size() == size - 1
    assert trie.keySet() == set(["/user/**", "/api/**"])
    support.checkInvariants(trie)


def test_remove_missing_does_not_mutate(trie):
    before = trie.pprint()
    assert trie.remove("/nowhere") is None
    assert trie.remove("/uaa") is None
    assert trie.remove("/uaa/**/x") is None
    assert trie.pprint() == before
    assert trie.size() == len(support.routeKeys)


def test_remove_inner_key_keeps_children(nodeType):
    trie = Trie({"ab": 1, "abc": 2}, nodeFactory=nodeType)
    assert trie.remove("ab") == 1
    assert trie.get("abc") == 2
    assert trie.size() == 1
    support.checkInvariants(trie)


def test_remove_prunes_empty_nodes(nodeType):
    trie = Trie({"ab": 1, "abcd": 2}, nodeFactory=nodeType)
    assert trie.remove("abcd") == 2
    assert trie._getNode("abc") is None
    assert not trie._getNode("ab").hasChildren()
    support.checkInvariants(trie)


def test_keySet(trie):
    keys = trie.keySet()
    assert keys == set(support.routeKeys)
    assert len(keys) == trie.size()
    for key in keys:
        assert trie.containsKey(key)


def test_none_is_a_value(nodeType):
    trie = Trie(nodeFactory=nodeType)
    assert trie.put("key", None) is None
    assert trie.size() == 1
    assert trie.containsKey("key")
    assert trie.prefixKey("keys") == "key"
    assert trie.put("key", 1) is None
    assert trie.size() == 1
    assert trie.remove("key") == 1
    assert trie.isEmpty()


@pytest.mark.parametrize("call", [
    lambda t: t.put(None, 1),
    lambda t: t.put("", 1),
    lambda t: t.put(5, 1),
    lambda t: t.get(None),
    lambda t: t.get(""),
    lambda t: t.containsKey(""),
    lambda t: t.remove(None),
    lambda t: t.remove(""),
    lambda t: t.prefix(""),
    lambda t: t.prefixKey(None),
    lambda t: t.putAll(None),
    lambda t: t.filter(None, "*"),
    lambda t: t.filter("text", None),
])
def test_invalid_arguments(trie, call):
    with pytest.raises(InvalidArgument):
        call(trie)
    assert trie.size() == len(support.routeKeys)


def test_invalid_argument_is_value_error():
    assert issubclass(InvalidArgument, ValueError)


def test_long_key(nodeType):
    key = "a" * 20000
    trie = Trie(nodeFactory=nodeType)
    trie.put(key, 1)
    trie.put(key[:-1], 2)
    assert trie.get(key) == 1
    assert trie.prefixKey(key + "a") == key
    assert trie.keySet() == set([key, key[:-1]])
    assert trie.remove(key) == 1
    assert trie.remove(key[:-1]) == 2
    assert trie.isEmpty()
    assert not trie.root.hasChildren()


def test_random_operations_keep_invariants(nodeType):
    rng = random.Random(1234)
    trie = Trie(nodeFactory=nodeType)
    model = {}
    for i in range(400):
        key = "".join(rng.choice("abc") for _ in range(rng.randint(1, 4)))
        if rng.random() < 0.6:
            assert trie.put(key, i) == model.get(key)
            model[key] = i
        else:
            assert trie.remove(key) == model.pop(key, None)
        if i % 20 == 0:
            support.checkInvariants(trie)
    support.checkInvariants(trie)
    assert dict(trie) == model
