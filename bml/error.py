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
The exception raised for text that is not valid BML.
"""


class BmlError(ValueError):
    """Raised when text can't be read as BML.

    The error knows where in the text reading failed:

    ``pos``
        the position of the offending text (0-based)
    ``line``, ``column``
        the line and column of that position (both 1-based)
    ``text``
        the offending text itself
    ``expected``
        a short description of what would have been valid there
    ``source_line``
        the full line of the source text the error is on

    Converted to a string, the error displays a diagnostic like::

        Invalid BML
         --> 3:1
          |
        3 |   c
          | ^--
          = unexpected indentation, expected a top-level element name

    """
    def __init__(self, message, pos=0, line=1, column=1, text='', expected='', source_line=''):
        super().__init__(message)
        self.message = message
        self.pos = pos
        self.line = line
        self.column = column
        self.text = text
        self.expected = expected
        self.source_line = source_line

    @classmethod
    def from_position(cls, source, pos, text, message, expected=''):
        """Create a BmlError for the ``text`` found at ``pos`` in ``source``."""
        start = source.rfind('\n', 0, pos) + 1
        end = source.find('\n', pos)
        if end == -1:
            end = len(source)
        line = source.count('\n', 0, pos) + 1
        column = pos - start + 1
        return cls(message, pos, line, column, text, expected, source[start:end])

    def __str__(self):
        number = str(self.line)
        gutter = ' ' * len(number)
        marker = ' ' * (self.column - 1) + '^' + '-' * max(0, len(self.text.rstrip()) - 1)
        description = self.message
        if self.expected:
            description += ", expected " + self.expected
        return '\n'.join((
            "Invalid BML",
            "{} --> {}:{}".format(gutter, self.line, self.column),
            "{} |".format(gutter),
            "{} | {}".format(number, self.source_line),
            "{} | {}".format(gutter, marker),
            "{} = {}".format(gutter, description),
        ))
