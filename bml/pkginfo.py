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
Meta-information about the bml package.

Keep the version in sync with pyproject.toml.

"""

name = "bml"
description = "Parser and writer for the BML markup format"
maintainer = "Wilbert Berendsen"
maintainer_email = "info@wilbertberendsen.nl"
url = "https://github.com/frescobaldi/bml"

# the version as a tuple of ints
version = (0, 4, 0)

# the full version number string
version_string = "{}.{}.{}".format(*version)
