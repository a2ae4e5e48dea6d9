# -*- coding: utf-8 -*-
#
# This file is part of `bml`, a library for the BML markup format
#
# Copyright © 2019-2022 by Wilbert Berendsen <info@wilbertberendsen.nl>
#
# This module is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This module is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <https://www.gnu.org/licenses/>.


"""
Test the node module.
"""

import io

import pytest

### find bml
import sys
sys.path.insert(0, '.')

from bml.indent import Indent
from bml.node import Attribute, Element, Root


def tree():
    """Return a small tree built by hand."""
    root = Root()
    server = Element()
    server.append('host', Attribute("example.com"))
    server.append('secure', Attribute())
    server.append('port', Element("80"))
    server.append('path', Element("/www/", "/cgi/"))
    server.append('port', Element("8080"))
    root.append('server', server)
    return root


def check_query():
    """Test the query methods."""
    root = tree()
    ((name, server),) = root.named_children()
    assert name == 'server'
    assert [n for n, node in server.named_children()] == ['host', 'secure', 'port', 'path', 'port']
    assert [node.value() for node in server.children_named('port')] == ['80', '8080']
    assert server.children_named('nothing') == ()
    assert server.children_named('path')[0].lines() == ("/www/", "/cgi/")
    assert server.children_named('path')[0].value() == "/www/\n/cgi/"
    assert server.children_named('secure')[0].lines() == ()

    with pytest.raises(ValueError):
        server.value()
    with pytest.raises(ValueError):
        server.children_named('secure')[0].value()


def check_append():
    """Test the constraints on appending nodes."""
    e = Element()
    e.append('a', Attribute("1"))
    e.append('b', Element())
    with pytest.raises(ValueError):
        e.append('c', Attribute("2"))
    with pytest.raises(TypeError):
        e.append('r', Root())
    with pytest.raises(TypeError):
        Root().append('a', Attribute("1"))
    with pytest.raises(TypeError):
        Attribute("1").append('a', Element())
    with pytest.raises(ValueError):
        Element("two\nlines")


def check_indent():
    """Test that the indent can only be set on the root."""
    root = Root()
    assert root.indent == Indent()
    root.set_indent("\t", 0)
    assert root.indent == Indent("\t", 0)
    with pytest.raises(TypeError):
        Element().set_indent("\t", 0)
    with pytest.raises(TypeError):
        Attribute().set_indent("\t", 0)


def check_equality():
    """Test comparing nodes."""
    assert tree() == tree()
    t = tree()
    t.set_indent("\t", 1)
    assert t == tree()       # the indent is not compared
    t.named_children()[0][1].append('extra', Element())
    assert t != tree()
    assert Attribute("a", quote=False) == Attribute("a")
    assert Element("a") != Element("b")

    # deeply nested trees
    def chain(depth, value):
        root = node = Root()
        for i in range(depth):
            child = Element()
            node.append("n", child)
            node = child
        node.data.append(value)
        return root
    assert chain(5000, "x") == chain(5000, "x")
    assert chain(5000, "x") != chain(5000, "y")
    assert chain(5000, "x") != chain(4999, "x")


def check_repr():
    """Test repr and dump."""
    assert repr(Element("80")) == "<Element '80'>"
    assert repr(Attribute("80", False)) == "<Attribute '80' unquoted>"
    assert repr(tree()) == "<Root (1 child)>"

    f = io.StringIO()
    tree().dump(f, "ascii")
    assert f.getvalue() == (
        "<Root (1 child)>\n"
        " `-server <Element (5 children)>\n"
        "    |-host <Attribute 'example.com'>\n"
        "    |-secure <Attribute>\n"
        "    |-port <Element '80'>\n"
        "    |-path <Element '/www/\\n/cgi/'>\n"
        "    `-port <Element '8080'>\n"
    )


def test_main():
    check_query()
    check_append()
    check_indent()
    check_equality()
    check_repr()


if __name__ == "__main__" and 'test_main' in globals():
    test_main()
