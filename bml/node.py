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
This module defines the node types a BML document is built of.

Every node has ``data``, a list of text lines, and ``children``, a
:class:`~.multimap.ListOrderedMultimap` of ``(name, node)`` pairs. There are
three kinds of node:

:class:`Root`
    The container of a whole document. It has no name and holds the top-level
    elements. It also carries the :class:`~.indent.Indent` policy that is used
    when the document is written out.

:class:`Element`
    A named node that can hold data lines, attributes and nested elements.

:class:`Attribute`
    A named leaf node with at most one data line, written on the line of its
    element. It knows whether its value is to be written with double quotes.

Attributes are child nodes too; they always come before the elements in the
children of an element.

Two nodes are equal if they have the same data lines and equal children; the
node type, the quoting of attributes and the indent policy are not compared.

Example::

    >>> import bml
    >>> root = bml.parse("server\\n  host: example.com\\n  port: 80\\n")
    >>> root.dump()
    <Root (1 child)>
     ╰╴server <Element (2 children)>
        ├╴host <Element 'example.com'>
        ╰╴port <Element '80'>
    >>> root.children_named('server')[0].children_named('port')[0].value()
    '80'

"""

import reprlib

from .indent import Indent
from .multimap import ListOrderedMultimap


DUMP_STYLES = {
    "ascii":   (" | ", "   ", " |-", " `-"),
    "round":   (" │ ", "   ", " ├╴", " ╰╴"),
    "square":  (" │ ", "   ", " ├╴", " └╴"),
    "double":  (" ║ ", "   ", " ╠═", " ╚═"),
    "thick":   (" ┃ ", "   ", " ┣╸", " ┗╸"),
    "flat":    ("│", " ", "├", "╰"),
}

DUMP_STYLE_DEFAULT = "round"


class BmlNode:
    """Base class for all BML nodes.

    The data lines can be given to the constructor. Child nodes are added
    using :meth:`append`.

    """

    __slots__ = ('data', 'children')

    def __init__(self, *lines):
        for line in lines:
            if '\n' in line:
                raise ValueError("a data line can't contain a newline: {!r}".format(line))
        self.data = list(lines)                     #: the data lines
        self.children = ListOrderedMultimap()       #: the (name, node) pairs

    def __repr__(self):
        def fields():
            yield type(self).__name__
            if self.data:
                yield reprlib.repr(self.data[0] if len(self.data) == 1 else '\n'.join(self.data))
            yield from self.repr_extra()
            if self.children:
                c = "child" if len(self.children) == 1 else "children"
                yield '({} {})'.format(len(self.children), c)
        return '<{}>'.format(' '.join(fields()))

    def repr_extra(self):
        """Yield extra strings to add to the repr; the default yields nothing."""
        return ()

    def __eq__(self, other):
        """Compare data and children; the type of node is not compared.

        The trees are walked using a stack, so deeply nested trees can be
        compared as well.

        """
        if not isinstance(other, BmlNode):
            return NotImplemented
        stack = [(self, other)]
        while stack:
            n1, n2 = stack.pop()
            if n1.data != n2.data or len(n1.children) != len(n2.children):
                return False
            for (name1, child1), (name2, child2) in zip(n1.children, n2.children):
                if name1 != name2:
                    return False
                stack.append((child1, child2))
        return True

    __hash__ = None

    def value(self):
        """Return the data lines joined with newlines.

        Raises ValueError if there are no data lines.

        """
        if not self.data:
            raise ValueError("{} has no data lines".format(type(self).__name__))
        return '\n'.join(self.data)

    def lines(self):
        """Return a tuple with the data lines, empty if there are none."""
        return tuple(self.data)

    def named_children(self):
        """Return a tuple with all child nodes as ``(name, node)`` tuples."""
        return tuple(self.children)

    def children_named(self, name):
        """Return a tuple with the child nodes that have the specified name.

        Finding the first node takes constant time, it does not scan the
        other children.

        """
        return tuple(self.children.get_all(name))

    def append(self, name, node):
        """Append a child node with the specified name.

        Attributes must come before any element. A Root node can never be a
        child.

        """
        if isinstance(node, Root):
            raise TypeError("a Root node can't be a child node")
        if isinstance(node, Attribute) and self.children:
            for last_name, last in reversed(self.children):
                if not isinstance(last, Attribute):
                    raise ValueError("attribute {!r} appended after element {!r}".format(name, last_name))
                break
        self.children.append(name, node)

    def set_indent(self, unit, repeat):
        """Set the indent policy; only possible on a Root node.

        Raises TypeError on every other node.

        """
        raise TypeError("BML indent can be set for root node only")

    def write(self, file=None, indent=None):
        """Write the BML text of this node to ``file``.

        The ``file`` can be any object with a ``write()`` method. If ``file``
        is None, the text is returned as a string. The ``indent`` is an
        :class:`~.indent.Indent` and defaults to the policy of the Root node,
        or two spaces without root indent for other nodes.

        See also the :class:`~.write.Writer` class.

        """
        from .write import Writer
        return Writer(indent).write(self, file)

    def __str__(self):
        return self.write()

    def dump(self, file=None, style=None):
        """Display a graphical representation of the node and its children.

        The file object defaults to stdout, and the style to "round". You can
        choose any style that's in the ``DUMP_STYLES`` dictionary.

        """
        print(repr(self), file=file)
        self._dump_children(file, DUMP_STYLES[style or DUMP_STYLE_DEFAULT], '')

    def _dump_children(self, file, d, prefix):
        """Print the children of this node with the prefix string."""
        last = len(self.children) - 1
        for i, (name, node) in enumerate(self.children):
            print(prefix + d[2 + (i == last)] + name + ' ' + repr(node), file=file)
            node._dump_children(file, d, prefix + d[i == last])


class Root(BmlNode):
    """The root node of a BML document.

    The ``indent`` attribute holds the :class:`~.indent.Indent` used to write
    the document, by default two spaces and no root indent. Use
    :meth:`set_indent` to change it.

    """

    __slots__ = ('indent',)

    def __init__(self, indent=None):
        super().__init__()
        self.indent = indent or Indent()    #: the indent policy

    @classmethod
    def from_text(cls, text):
        """Read a Root node from BML text.

        Raises :class:`~.error.BmlError` if the text is not valid BML.

        """
        from .read import parse
        return parse(text)

    def append(self, name, node):
        """Append a top-level element."""
        if isinstance(node, Attribute):
            raise TypeError("a Root node can't have attributes")
        super().append(name, node)

    def set_indent(self, unit, repeat):
        """Set the indent ``unit`` string of child nodes and the number of
        times it is repeated at root level.

        The default is two spaces (``"  "``) and no root indent (``0``). A
        usual alternative is a tabulator (``"\\t"``) and no root indent.

        This only changes how the document is written; the tree itself is not
        modified.

        """
        self.indent = Indent(unit, repeat)


class Element(BmlNode):
    """A named node with data lines, attributes and nested elements."""

    __slots__ = ()


class Attribute(BmlNode):
    """A named leaf node with at most one data line.

    If ``quote`` is True (the default), the value is written between double
    quotes. It is False when the value was read from the unquoted notation.

    """

    __slots__ = ('quote',)

    def __init__(self, value=None, quote=True):
        if value is None:
            super().__init__()
        else:
            super().__init__(value)
        self.quote = quote      #: whether to quote the value on output

    def repr_extra(self):
        if self.data and not self.quote:
            yield 'unquoted'

    def append(self, name, node):
        """Raise TypeError, attributes can't have child nodes."""
        raise TypeError("an Attribute can't have child nodes")
