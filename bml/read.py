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
Functions to read BML text into a :class:`~bml.node.Root` node.

Reading happens in two steps: first parce lexes the text using the
:class:`~bml.lang.bml.Bml` language definition, then the parce tree is checked
for :data:`~parce.action.Invalid` tokens and, if there are none, transformed
into nodes by the :class:`~bml.lang.bml.BmlTransform`.

Example::

    >>> import bml
    >>> root = bml.parse("server\\n  host: example.com\\n")
    >>> root.children_named('server')[0].children_named('host')[0].value()
    'example.com'

Invalid text raises a :class:`~bml.error.BmlError`; a partial tree is never
returned.

"""

import logging

import parce
import parce.action as a
from parce.transform import transform_tree

from .error import BmlError
from .lang.bml import Bml, BmlTransform
from .node import Root


logger = logging.getLogger(__name__)

_transform = BmlTransform()


#: what is expected where an error is found, by lexicon name
EXPECTED = {
    "root": "a top-level element name or a comment",
    "header": "an attribute, ':' with data or the end of the line",
    "attr": 'a closing \'"\'',
    "block": "an element name or ':' with data",
    "top": "an element name at the indent of the first element",
}


def tree(text):
    """Return the parce tree (the root context) of the BML text.

    The tree may contain :data:`~parce.action.Invalid` tokens, see
    :func:`errors`.

    """
    return parce.root(Bml.root, text)


def errors(text, context=None):
    """Yield a :class:`~bml.error.BmlError` for every error in the text.

    If ``context`` is given, it should be the parce tree of the text, as
    returned by :func:`tree`. Otherwise the text is lexed first.

    """
    if context is None:
        context = tree(text)
    for token in context.tokens():
        if token.action is a.Invalid:
            lexicon = token.parent.lexicon.name
            if token.text[:1] in (' ', '\t') and (token.pos == 0 or text[token.pos - 1] == '\n'):
                message = "unexpected indentation"
            elif token.text.startswith('="'):
                message = "unterminated quoted value"
            else:
                message = "unexpected {!r}".format(token.text.strip())
            yield BmlError.from_position(text, token.pos, token.text,
                message, EXPECTED.get(lexicon, ''))


def check(text, context=None):
    """Raise a :class:`~bml.error.BmlError` for the first error in the text.

    Does nothing if the text is valid BML.

    """
    for error in errors(text, context):
        logger.debug("invalid BML at %d:%d: %s", error.line, error.column, error.message)
        raise error


def parse(text):
    """Return a :class:`~bml.node.Root` node read from the text.

    Raises :class:`~bml.error.BmlError` if the text is not valid BML.

    """
    context = tree(text)
    check(text, context)
    root = transform_tree(context, _transform) if len(context) else Root()
    logger.debug("read %d characters of BML, %d top-level nodes", len(text), len(root.children))
    return root


def load(filename, encoding='utf-8', errors=None):
    """Read the file ``filename`` and return a :class:`~bml.node.Root` node.

    The ``encoding`` and ``errors`` arguments are passed to Python's
    :func:`open` function. Raises :class:`OSError` if the file can't be read
    and :class:`~bml.error.BmlError` if it is not valid BML.

    """
    with open(filename, encoding=encoding, errors=errors) as f:
        text = f.read()
    logger.debug("loaded %s", filename)
    return parse(text)
