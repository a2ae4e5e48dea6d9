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
Test reading BML text.
"""

import types

import pytest

### find bml
import sys
sys.path.insert(0, '.')

import bml
from bml import BmlError, Root
from bml.node import Attribute, Element
from bml.lang.bml import BmlTransform
from bml.read import check, errors, parse, tree


EXAMPLE = (
    "server\n"
    "  path: /core/www/\n"
    "  host: example.com\n"
    "  port: 80\n"
    "  service: true\n"
    "  proxy\n"
    "    host: proxy.example.com\n"
    "    port: 8080\n"
    "    authentication: plain\n"
    "  description\n"
    "    :Primary web-facing server\n"
    "    :Provides commerce-related functionality\n"
    "\n"
    "server\n"
    "  // ...\n"
    "  proxy host=\"proxy.example.com\" port=\"8080\"\n"
    "    authentication: plain\n"
)


def check_example():
    """Test reading a full document."""
    root = parse(EXAMPLE)
    assert isinstance(root, Root)
    assert [name for name, node in root.named_children()] == ['server', 'server']
    first, second = root.children_named('server')
    assert first.children_named('port')[0].value() == '80'
    assert first.children_named('proxy')[0].children_named('host')[0].value() == 'proxy.example.com'
    assert first.children_named('description')[0].lines() == (
        'Primary web-facing server',
        'Provides commerce-related functionality',
    )
    proxy = second.children_named('proxy')[0]
    host, port, auth = proxy.named_children()
    assert host[0] == 'host' and isinstance(host[1], Attribute)
    assert host[1].value() == 'proxy.example.com'
    assert host[1].quote
    assert port[1].value() == '8080'
    assert auth[0] == 'authentication' and isinstance(auth[1], Element)
    assert auth[1].value() == 'plain'

    assert Root.from_text(EXAMPLE) == root
    assert bml.parse(EXAMPLE) == root


def check_order():
    """Test that duplicate names keep their order."""
    root = parse("0:a\n1:b\n2:c\n1:d\n3:e\n")
    assert [(name, node.value()) for name, node in root.named_children()] == [
        ("0", "a"), ("1", "b"), ("2", "c"), ("1", "d"), ("3", "e")]
    assert [node.value() for node in root.children_named("1")] == ["b", "d"]


def check_attributes():
    """Test the attribute notations."""
    root = parse('a q="x y" u=http://example.com/ flag e=""\n')
    a = root.children_named('a')[0]
    q, u, flag, e = (node for name, node in a.named_children())
    assert q.value() == 'x y' and q.quote
    assert u.value() == 'http://example.com/' and not u.quote
    assert flag.lines() == ()
    assert e.lines() == ('',) and e.quote

    # tabs between attributes
    root = parse('a\tb="1"\t\tc=2\n')
    assert [name for name, node in root.children_named('a')[0].named_children()] == ['b', 'c']

    # attributes come before nested elements
    root = parse('a b="1"\n  c: 2\n')
    kinds = [type(node) for name, node in root.children_named('a')[0].named_children()]
    assert kinds == [Attribute, Element]


def check_data():
    """Test inline and block data lines."""
    root = parse("a: inline\n  : second\n  :third\n")
    assert root.children_named('a')[0].lines() == ('inline', 'second', 'third')

    root = parse("a:\t\tvalue with spaces  \n")
    assert root.children_named('a')[0].value() == 'value with spaces  '

    root = parse("a\n  b\n")
    b = root.children_named('a')[0].children_named('b')[0]
    assert b.lines() == ()


def check_layout():
    """Test comments, blank lines and different indents."""
    root = parse(
        "// a comment\n"
        "\n"
        "a\n"
        "  // nested comment\n"
        "    // deeper comment\n"
        "  b: 1\n"
        "   \n"
        "  c\n"
        "      d: 2\n"
        "  e: 3\n"
    )
    a = root.children_named('a')[0]
    assert [name for name, node in a.named_children()] == ['b', 'c', 'e']
    assert a.children_named('c')[0].children_named('d')[0].value() == '2'

    # tabs, consistently used
    root = parse("a\n\tb\n\t\tc: 1\n\td: 2\n")
    a = root.children_named('a')[0]
    assert a.children_named('b')[0].children_named('c')[0].value() == '1'
    assert a.children_named('d')[0].value() == '2'

    # indented top-level elements
    root = parse("  a: 1\n\n  b\n    c: 2\n")
    assert [name for name, node in root.named_children()] == ['a', 'b']
    assert root == parse("a: 1\nb\n  c: 2\n")

    # no newline at the end
    assert parse("a\n  b: 1").children_named('a')[0].children_named('b')[0].value() == '1'

    assert parse("") == Root()
    assert not parse("// nothing\n\n").named_children()


def check_errors():
    """Test invalid BML."""
    # inconsistent indentation
    with pytest.raises(BmlError) as info:
        parse("a\n    b\n  c\n")
    e = info.value
    assert isinstance(e, ValueError)
    assert (e.line, e.column) == (3, 1)
    assert e.message == "unexpected indentation"
    assert e.source_line == "  c"
    assert str(e).startswith("Invalid BML\n")

    # mixed tabs and spaces
    with pytest.raises(BmlError) as info:
        parse("a\n\tb\n  c\n")
    assert info.value.line == 3

    # unterminated quoted value
    with pytest.raises(BmlError) as info:
        parse('a\n  b x="abc\n')
    e = info.value
    assert (e.line, e.column) == (2, 6)
    assert e.message == "unterminated quoted value"

    # garbage in a block
    with pytest.raises(BmlError) as info:
        parse("a\n  =x\n")
    assert (info.value.line, info.value.column) == (2, 3)

    # only the first top-level element sets the indent
    with pytest.raises(BmlError):
        parse("  a\nb\n")

    with pytest.raises(BmlError):
        Root.from_text("a b=\n")

    assert check("a\n  b: 1\n") is None
    assert len(list(errors("a\n    b\n  c\n  d\n"))) == 2
    assert not list(errors(EXAMPLE, tree(EXAMPLE)))

    # garbage after a blank is not an indentation error
    with pytest.raises(BmlError) as info:
        parse("a !\n")
    e = info.value
    assert (e.line, e.column) == (1, 2)
    assert e.message == "unexpected '!'"


def check_transform():
    """Test that the transform refuses contexts it does not know."""
    def item(name, obj):
        return types.SimpleNamespace(is_token=False, name=name, obj=obj)

    t = BmlTransform()
    with pytest.raises(RuntimeError):
        t.root([item("block", [])])
    with pytest.raises(RuntimeError):
        t.node([item("block", [("attr", ("a", None))])])
    with pytest.raises(RuntimeError):
        t.header([item("block", [])])
    with pytest.raises(RuntimeError):
        t.top([item("data", "x")])
    assert t.block([item("data", "x")]) == [("data", "x")]


def check_load(tmp_path):
    """Test loading a file."""
    filename = tmp_path / "servers.bml"
    filename.write_text(EXAMPLE, encoding='utf-8')
    assert bml.load(str(filename)) == parse(EXAMPLE)
    with pytest.raises(OSError):
        bml.load(str(tmp_path / "missing.bml"))


def test_main(tmp_path):
    check_example()
    check_order()
    check_attributes()
    check_data()
    check_layout()
    check_errors()
    check_transform()
    check_load(tmp_path)


if __name__ == "__main__" and 'test_main' in globals():
    import pathlib, tempfile
    with tempfile.TemporaryDirectory() as d:
        test_main(pathlib.Path(d))
