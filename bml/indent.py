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
The indent policy used when writing out a BML tree.

An :class:`Indent` is a small immutable value: a unit string (two spaces by
default) and the number of times it is repeated. Converted to a string, it
gives the leading whitespace for a line at that level::

    >>> from bml.indent import Indent
    >>> str(Indent("\\t", 2))
    '\\t\\t'
    >>> str(Indent().next())
    '  '

"""


class Indent:
    """Holds the indent ``unit`` string and its ``repeat`` count."""

    __slots__ = ('_unit', '_repeat')

    def __init__(self, unit="  ", repeat=0):
        if repeat < 0:
            raise ValueError("indent repeat count can't be negative")
        self._unit = unit
        self._repeat = repeat

    @property
    def unit(self):
        """The string that is repeated for every level."""
        return self._unit

    @property
    def repeat(self):
        """How many times the unit is repeated at this level."""
        return self._repeat

    def next(self):
        """Return the Indent for one level deeper."""
        return type(self)(self._unit, self._repeat + 1)

    def __str__(self):
        return self._unit * self._repeat

    def __eq__(self, other):
        if isinstance(other, Indent):
            return self._unit == other._unit and self._repeat == other._repeat
        return NotImplemented

    def __hash__(self):
        return hash((self._unit, self._repeat))

    def __repr__(self):
        return '<{} {!r} * {}>'.format(type(self).__name__, self._unit, self._repeat)
