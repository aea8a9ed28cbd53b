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

from .dublincore import DC_ELEMENTS, WELL_KNOWN_ATTRIBUTES, Static, Mapped


class Crosswalk(object):
    """Resolves Dublin Core element values for a record, given the mapping of
    its kind.

    A static value wins outright. A mapped slug is tried against the
    resolvers in order: the record's custom field of that name, then the
    well-known record attribute of that name. Values are always returned as
    a list of non-empty strings; an empty list means the element is left
    out."""

    def __init__(self, catalogue):
        self._catalogue = catalogue
        self._resolvers = [self._customField, self._wellKnownAttribute]

    def resolveElement(self, record, mapping, element):
        source = mapping.source(element)
        if isinstance(source, Static):
            return [source.value]
        if isinstance(source, Mapped):
            for resolver in self._resolvers:
                values = _values(resolver(record, source.slug))
                if values:
                    return values
        return []

    def catalogValue(self, record, mapping):
        values = self.resolveElement(record, mapping, 'identifier')
        return values[0] if values else ''

    def oaiIdentifier(self, record, mapping):
        catalogValue = self.catalogValue(record, mapping)
        if not catalogValue:
            return ''
        return mapping.identifierPrefix + catalogValue

    def dublinCore(self, record, mapping):
        """[(element, [values])] for every element with a value, in Dublin Core
        order. The identifier element always carries the OAI identifier, so
        what a harvester reads can be used to fetch the record again."""
        result = []
        for element in DC_ELEMENTS:
            values = self.resolveElement(record, mapping, element)
            if not values:
                continue
            if element == 'identifier':
                values = [self.oaiIdentifier(record, mapping)]
            result.append((element, values))
        return result

    def _customField(self, record, slug):
        return self._catalogue.getFieldValue(record, slug)

    def _wellKnownAttribute(self, record, slug):
        if slug not in WELL_KNOWN_ATTRIBUTES:
            return None
        return self._catalogue.getWellKnownAttribute(record, slug)


def _values(value):
    if value is None:
        return []
    if not isinstance(value, (list, tuple)):
        value = [value]
    return [str(v) for v in value if v is not None and str(v) != '']
