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
BML language and transform definition.

The :class:`Bml` language lexes BML text into a tree of parce contexts. The
indentation is handled by the ``block`` lexicon, which is derived with the
leading whitespace of its lines as argument. Nested blocks therefore form a
stack of indent strings: a line belongs to the innermost block whose indent it
starts with exactly; a line that is indented deeper than a block, but does not
belong to a child element, is an error, just as a line whose indent is not on
the stack at all. Indents are compared as strings, so tabs and spaces can be
mixed, as long as that is done consistently.

The contexts created are:

``root``
    the whole document, containing ``node`` contexts and comments
``node``
    one element, containing a ``header`` and possibly a ``block``
``header``
    the line of an element: its name, ``attr`` contexts and optional ``data``
``attr``
    an attribute: its name and optional value
``data``
    one data line, after a colon
``block``
    the indented lines of an element, containing ``data`` and ``node``
    contexts
``top``
    only used when the first element of the document is indented: all
    top-level ``node`` contexts, at that indent

Text that can't be parsed is lexed with the :data:`~parce.action.Invalid`
action; :mod:`bml.read` checks for those tokens before the tree is transformed.

The :class:`BmlTransform` transforms the parce tree into a
:class:`~bml.node.Root` node.

"""

import re

import parce.action as a
from parce import Language, lexicon, default_action, default_target, skip
from parce.rule import ARG, MATCH, bygroup, call, derive, pattern
from parce.transform import Transform

from bml.node import Attribute, Element, Root


#: the characters a name can start with
NAME_CHAR = r'[A-Za-z0-9.\-]'

#: an element or attribute name
NAME = NAME_CHAR + '+'


def _line(indent, suffix):
    """Return a pattern matching ``indent`` at the start of a line, followed by ``suffix``."""
    return '^' + re.escape(indent or '') + suffix


def _deeper(indent):
    """Return a pattern matching a line indented deeper than ``indent``.

    The full indent of that line is captured in the first group.

    """
    return r'^(?=(' + re.escape(indent or '') + r'[ \t]+)[^ \t\n])'


class Bml(Language):
    """BML language definition."""

    @lexicon(re_flags=re.MULTILINE)
    def root(cls):
        yield r'\A(?:[ \t]*(?://[^\n]*)?\n)*(?=([ \t]+)' + NAME_CHAR + ')', skip, derive(cls.top, MATCH[1])
        yield r'^[ \t]*//[^\n]*', a.Comment
        yield r'^[ \t]+$', skip
        yield r'\n', skip
        yield r'^(?=' + NAME_CHAR + ')', skip, cls.node, cls.header
        yield default_action, a.Invalid

    @lexicon(re_flags=re.MULTILINE)
    def node(cls):
        """An element, the lexicon argument is the indent of its line.

        The first line of the element is in a ``header`` context, that is
        pushed together with this lexicon. Lines that are indented deeper
        start a ``block``; the first line that isn't ends the element.

        """
        yield r'^[ \t]*//[^\n]*', a.Comment
        yield r'^[ \t]+$', skip
        yield r'\n', skip
        yield pattern(call(_deeper, ARG)), skip, derive(cls.block, MATCH[1])
        yield default_target, -1

    @lexicon(re_flags=re.MULTILINE)
    def header(cls):
        """The name, attributes and inline data of an element."""
        yield r'(?<![^ \t\n])' + NAME, a.Name.Tag
        yield r'[ \t]*:[ \t]*', a.Delimiter, cls.data
        yield r'[ \t]+(?=' + NAME_CHAR + ')', skip, cls.attr
        yield r'[ \t]+$', skip
        yield r'\n', skip, -1
        yield default_action, a.Invalid

    @lexicon
    def attr(cls):
        """An attribute, with an optional quoted or unquoted value."""
        yield NAME, a.Name.Attribute
        yield r'(=)(")([^"\n]*)(")', bygroup(a.Operator, a.Delimiter, a.String.Double, a.Delimiter), -1
        yield r'="[^"\n]*', a.Invalid, -1     # unterminated quoted value
        yield r'(=)([^\s"]+)', bygroup(a.Operator, a.String), -1
        yield default_target, -1

    @lexicon(consume=True)
    def data(cls):
        """One data line, the colon is consumed."""
        yield r'[^\n]+', a.Text
        yield default_target, -1

    @lexicon(re_flags=re.MULTILINE)
    def block(cls):
        """The indented lines of an element, the lexicon argument is their indent."""
        yield r'^[ \t]*//[^\n]*', a.Comment
        yield r'^[ \t]+$', skip
        yield r'\n', skip
        yield pattern(call(_line, ARG, '(?=' + NAME_CHAR + ')')), skip, derive(cls.node, ARG), cls.header
        yield pattern(call(_line, ARG, r':[ \t]*')), a.Delimiter, cls.data
        yield pattern(call(_line, ARG, r'([^\n]+)')), bygroup(a.Invalid)
        yield default_target, -2    # leave the block and its element

    @lexicon(re_flags=re.MULTILINE)
    def top(cls):
        """Top-level elements that are all indented, the lexicon argument is
        their indent.

        This lexicon is only used when the first element of the document is
        indented.

        """
        yield r'^[ \t]*//[^\n]*', a.Comment
        yield r'^[ \t]+$', skip
        yield r'\n', skip
        yield pattern(call(_line, ARG, '(?=' + NAME_CHAR + ')')), skip, derive(cls.node, ARG), cls.header
        yield r'^[^\n]+', a.Invalid
        yield default_action, a.Invalid


class BmlTransform(Transform):
    """Transform BML to a :class:`~bml.node.Root` node.

    The ``node`` method returns a ``(name, Element)`` tuple, that is appended
    to the parent node, both for top-level elements and nested ones.

    Assumes a tree without :data:`~parce.action.Invalid` tokens; any production
    that can't be handled raises a RuntimeError.

    """
    def root(self, items):
        """Build the Root node."""
        root = Root()
        for i in items:
            if i.is_token:
                continue    # a comment
            elif i.name == "node":
                root.append(*i.obj)
            elif i.name == "top":
                for name, node in i.obj:
                    root.append(name, node)
            else:
                raise RuntimeError("unexpected {!r} context in BML root".format(i.name))
        return root

    def node(self, items):
        """Return a ``(name, Element)`` tuple.

        Attributes are appended before the nested elements; the inline data
        line (if any) comes before the data lines in the block.

        """
        name = None
        element = Element()
        for i in items:
            if i.is_token:
                continue
            elif i.name == "header":
                name, attrs, lines = i.obj
                element.data.extend(lines)
                for attr in attrs:
                    element.append(*attr)
            elif i.name == "block":
                for kind, obj in i.obj:
                    if kind == "data":
                        element.data.append(obj)
                    elif kind == "node":
                        element.append(*obj)
                    else:
                        raise RuntimeError("unexpected {!r} context in BML block".format(kind))
            else:
                raise RuntimeError("unexpected {!r} context in BML node".format(i.name))
        return name, element

    def header(self, items):
        """Return a tuple ``(name, attrs, lines)``.

        The ``attrs`` is a list of ``(name, Attribute)`` tuples and ``lines``
        a list with the inline data line, if any.

        """
        name = None
        attrs = []
        lines = []
        for i in items:
            if i.is_token:
                if i.action is a.Name.Tag:
                    name = i.text
            elif i.name == "attr":
                attrs.append(i.obj)
            elif i.name == "data":
                lines.append(i.obj)
            else:
                raise RuntimeError("unexpected {!r} context in BML header".format(i.name))
        return name, attrs, lines

    def attr(self, items):
        """Return a ``(name, Attribute)`` tuple.

        If the value was not quoted, the ``quote`` flag of the attribute is
        set to False.

        """
        name = None
        value = None
        attr = Attribute()
        for t in items:
            if t.action is a.Name.Attribute:
                name = t.text
            elif t.action is a.Operator:
                value = ''
            elif t.action is a.String.Double:
                value += t.text
            elif t.action is a.String:
                value += t.text
                attr.quote = False
        if value is not None:
            attr.data.append(value)
        return name, attr

    def data(self, items):
        """Return the text of the data line."""
        return ''.join(t.text for t in items if t.is_token and t.action is a.Text)

    def block(self, items):
        """Return a list of ``(kind, obj)`` tuples.

        The kind is ``"data"`` for a data line and ``"node"`` for a nested
        element.

        """
        return [(i.name, i.obj) for i in items if not i.is_token]

    def top(self, items):
        """Return a list of ``(name, Element)`` tuples for indented top-level elements."""
        nodes = []
        for i in items:
            if i.is_token:
                continue
            elif i.name == "node":
                nodes.append(i.obj)
            else:
                raise RuntimeError("unexpected {!r} context in indented BML root".format(i.name))
        return nodes
