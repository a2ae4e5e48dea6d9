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
Registration of the BML language definition with parce.

The :data:`registry` is a :class:`parce.registry.Registry` of its own, so the
BML root lexicon can be found by name, alias, filename or mimetype, without
modifying parce's global registry::

    >>> import bml
    >>> bml.find('bml')
    Bml.root
    >>> bml.find(filename='servers.bml')
    Bml.root

"""

__all__ = ['find', 'registry']


import parce.registry


#: the Registry with the languages bundled with bml
registry = parce.registry.Registry()

registry.register("bml.lang.bml.Bml.root",
    name = "BML",
    desc = "Indentation based markup language for static databases",
    aliases = ["bml"],
    filenames = [("*.bml", 1)],
    mimetypes = [("text/x-bml", 1)],
)


def find(name=None, *, filename=None, mimetype=None, contents=None):
    """Return the root lexicon for the language ``name``, or the language
    that best matches ``filename``, ``mimetype`` and/or ``contents``.

    The languages bundled with bml are tried first; if none matches, the
    arguments are passed on to :func:`parce.find`.

    """
    if name:
        lexicon_name = registry.find(name)
    else:
        lexicon_name = next(iter(registry.suggest(filename, mimetype, contents)), None)
    if not lexicon_name:
        return parce.find(name, filename=filename, mimetype=mimetype, contents=contents)
    return parce.registry.root_lexicon(lexicon_name)
