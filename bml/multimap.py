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
An ordered multimap, used to store the child nodes of a BML node.

A :class:`ListOrderedMultimap` keeps all ``(key, value)`` pairs in the order
they were appended, also when keys repeat. Besides the list of pairs it keeps
a dictionary that maps every key to the positions of its pairs, so finding the
values for one key does not require scanning all pairs::

    >>> from bml.multimap import ListOrderedMultimap
    >>> m = ListOrderedMultimap()
    >>> m.append('a', 1)
    >>> m.append('b', 2)
    >>> m.append('a', 3)
    >>> list(m)
    [('a', 1), ('b', 2), ('a', 3)]
    >>> list(m.get_all('a'))
    [1, 3]

The multimap can only grow; there are no methods to remove or replace pairs.

"""


class ListOrderedMultimap:
    """A multimap that keeps the insertion order of all its pairs.

    Iterating over the multimap yields the ``(key, value)`` tuples, in the
    order they were appended. The ``in`` operator tests for the presence of a
    key. Two multimaps compare equal if they contain the same pairs in the
    same order.

    """

    __slots__ = ('_entries', '_index')

    def __init__(self, pairs=()):
        self._entries = []      # list of (key, value) tuples
        self._index = {}        # key -> list of positions in _entries
        for key, value in pairs:
            self.append(key, value)

    def append(self, key, value):
        """Append a value for key, after all pairs that are already there."""
        self._index.setdefault(key, []).append(len(self._entries))
        self._entries.append((key, value))

    def get_all(self, key):
        """Iterate over all values for key, in the order they were appended.

        Finding the first value takes constant time.

        """
        entries = self._entries
        return (entries[i][1] for i in self._index.get(key, ()))

    def get(self, key, default=None):
        """Return the first value for key, or ``default`` if key is absent."""
        try:
            positions = self._index[key]
        except KeyError:
            return default
        return self._entries[positions[0]][1]

    def count(self, key):
        """Return the number of values stored for key."""
        return len(self._index.get(key, ()))

    def keys(self):
        """Return the distinct keys, in the order they were first appended."""
        return list(self._index)

    def values(self):
        """Return all values, in order."""
        return [value for key, value in self._entries]

    def items(self):
        """Return all ``(key, value)`` pairs, in order."""
        return list(self._entries)

    def __len__(self):
        return len(self._entries)

    def __bool__(self):
        return bool(self._entries)

    def __iter__(self):
        return iter(self._entries)

    def __reversed__(self):
        return reversed(self._entries)

    def __contains__(self, key):
        return key in self._index

    def __eq__(self, other):
        if isinstance(other, ListOrderedMultimap):
            return self._entries == other._entries
        return NotImplemented

    __hash__ = None

    def __repr__(self):
        return '{}({!r})'.format(type(self).__name__, self._entries)
