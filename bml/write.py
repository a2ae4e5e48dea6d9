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
Write a BML node tree back to text.

The :class:`Writer` walks the tree and writes the canonical BML notation to
any object with a ``write()`` method:

* top-level elements are separated by a blank line;
* an element without attributes and with exactly one data line is written
  on one line as ``name: value``;
* otherwise every data line is written on its own line as ``:line``, indented
  one level deeper than the element;
* attributes are written after the name of their element, as ``name``,
  ``name=value`` or ``name="value"``;
* nested elements are indented one level deeper than their parent.

The indent of every level is an :class:`~.indent.Indent`, by default taken
from the :class:`~.node.Root` node that is written.

Comments and the original alignment of the text are not kept, but reading
the written text again results in an equal tree.

"""

import io
import itertools
import logging

from .indent import Indent
from .node import Attribute, Element, Root


logger = logging.getLogger(__name__)


class Writer:
    """Writes the BML text of a node.

    The ``indent`` is an :class:`~.indent.Indent`. If None (the default), the
    indent policy of the Root node is used, or the default Indent (two spaces,
    no root indent) when a node other than the Root is written. It can also
    be set later using the attribute of the same name.

    Call :meth:`write` to write out a node.

    """
    def __init__(self, indent=None):
        #: the Indent to start with, or None
        self.indent = indent

    def write(self, node, file=None):
        """Write the node to the file.

        If ``file`` is None, the text is returned as a string.

        """
        if file is None:
            f = io.StringIO()
            self.write(node, f)
            return f.getvalue()
        indent = self.indent
        if indent is None:
            indent = node.indent if isinstance(node, Root) else Indent()
        logger.debug("writing %r using %r", node, indent)
        self.write_node(file, node, '', indent)

    def write_node(self, f, node, name, indent):
        """Write one node with its name, at the specified indent."""
        if isinstance(node, Root):
            self.write_root(f, node, indent)
        elif isinstance(node, Attribute):
            self.write_attribute(f, node, name)
        elif isinstance(node, Element):
            self.write_element(f, node, name, indent)
        else:
            raise TypeError("can't write {!r}".format(node))

    def write_root(self, f, node, indent):
        """Write the top-level elements of the Root node; its name is never written."""
        for i, (name, child) in enumerate(node.children):
            if i:
                f.write('\n')
            self.write_node(f, child, name, indent)

    def write_element(self, f, node, name, indent):
        """Write an Element with its attributes, data lines and children."""
        f.write('{}{}'.format(indent, name))
        indent = indent.next()
        attrs = 0
        for attr_name, attr in node.children:
            if not isinstance(attr, Attribute):
                break
            self.write_attribute(f, attr, attr_name)
            attrs += 1
        if not attrs and len(node.data) == 1:
            f.write(': {}\n'.format(node.data[0]))
        else:
            f.write('\n')
            for line in node.data:
                f.write('{}:{}\n'.format(indent, line))
        for child_name, child in itertools.islice(node.children, attrs, None):
            self.write_node(f, child, child_name, indent)

    def write_attribute(self, f, node, name):
        """Write an Attribute on the current line; no newline is written."""
        f.write(' ' + name)
        if node.data:
            value = node.data[0]
            f.write('="{}"'.format(value) if node.quote else '={}'.format(value))
