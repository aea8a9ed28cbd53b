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

from os import rename, makedirs
from os.path import isfile, dirname, isdir

from simplejson import load, dump

from .dublincore import DublinCoreMapping, validateMapping


class KindConfiguration(object):
    """Dublin Core mappings per kind, kept in one JSON file keyed by kind id.

    A kind without a stored mapping gets the default one, so it is
    harvestable without configuration."""

    def __init__(self, filename, siteUrl=None):
        self._filename = filename
        self._siteUrl = siteUrl
        self._load()

    def getMapping(self, kind):
        data = self._data.get(str(kind.id))
        if data is None:
            return DublinCoreMapping.withDefaults(siteUrl=self._siteUrl)
        return DublinCoreMapping.fromDict(data)

    def setMapping(self, kind, mapping):
        errors = self.validateMapping(kind, mapping)
        if errors:
            raise ValueError('Invalid Dublin Core mapping for kind %s: %s' % (kind.id, ' '.join(errors)))
        self._data[str(kind.id)] = mapping.asDict()
        self._save()
        kind.mapping = mapping

    def validateMapping(self, kind, mapping):
        return validateMapping(mapping, kind.fields)

    def removeKind(self, kind):
        if self._data.pop(str(kind.id), None) is not None:
            self._save()

    def _save(self):
        directory = dirname(self._filename)
        if directory and not isdir(directory):
            makedirs(directory)
        with open(self._filename + "~", 'w') as f:
            dump(self._data, f)
        rename(self._filename + "~", self._filename)

    def _load(self):
        if isfile(self._filename):
            with open(self._filename) as f:
                self._data = load(f)
        else:
            self._data = {}
