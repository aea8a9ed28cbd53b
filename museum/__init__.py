## begin license ##
#
# "Museum Oai" exposes museum catalogue records through OAI-PMH 2.0,
# rendered as Dublin Core according to per-kind field mappings.
#
# Copyright (C) 2025 Museum Oai contributors
#
# This file is part of "Museum Oai"
#
# "Museum Oai" is free software; you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation; either version 2 of the License, or
# (at your option) any later version.
#
# "Museum Oai" is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with "Museum Oai"; if not, write to the Free Software
# Foundation, Inc., 51 Franklin St, Fifth Floor, Boston, MA  02110-1301  USA
#
## end license ##

