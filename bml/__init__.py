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
The bml module.

Reads and writes BML, a simplified XML-like markup language that uses
indentation to nest elements, and is used as a static database format::

    server
      path: /core/www/
      host: example.com
      port: 80
      proxy
        host: proxy.example.com
        port: 8080
      description
        :Primary web-facing server
        :Provides commerce-related functionality

    server
      // ...
      proxy host="proxy.example.com" port="8080"
        authentication: plain

Use :func:`parse` to read text into a :class:`~.node.Root` node, and
:meth:`~.node.BmlNode.write` (or :func:`str`) to get the text back::

    >>> import bml
    >>> root = bml.parse("server\\n  port: 80\\n")
    >>> name, server = root.named_children()[0]
    >>> name
    'server'
    >>> server.children_named('port')[0].value()
    '80'
    >>> root.set_indent('\\t', 0)
    >>> str(root)
    'server\\n\\tport: 80\\n'

"""

from .error import BmlError
from .indent import Indent
from .node import Attribute, BmlNode, Element, Root
from .pkginfo import version, version_string
from .read import check, load, parse
from .registry import find


__all__ = (
    'Attribute',
    'BmlError',
    'BmlNode',
    'Element',
    'Indent',
    'Root',
    'check',
    'find',
    'load',
    'parse',
    'version',
    'version_string',
)
