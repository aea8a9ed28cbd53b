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

from .dublincore import Mapped


class IdentifierResolver(object):
    """Maps OAI identifiers to (kind, record) and back.

    An OAI identifier is the kind's identifierPrefix followed by the record's
    catalog value. Decoding is a search: kinds are scanned in catalogue
    order, every kind whose prefix starts the identifier is asked for the one
    record with the remaining catalog value, and the first hit wins. Results
    are only well defined when no two kinds share a prefix.

    accept, when given, filters candidate records before uniqueness is
    decided; a kind without an acceptable record does not stop the scan."""

    def __init__(self, catalogue, crosswalk):
        self._catalogue = catalogue
        self._crosswalk = crosswalk

    def encode(self, kind, record):
        return self._crosswalk.oaiIdentifier(record, kind.mapping)

    def decode(self, identifier, accept=None):
        for kind in self._catalogue.listKinds():
            prefix = kind.mapping.identifierPrefix
            if not identifier.startswith(prefix):
                continue
            catalogValue = identifier[len(prefix):]
            if not catalogValue:
                continue
            record = self._uniqueRecord(kind, catalogValue, accept)
            if record is not None:
                return kind, record
        return None

    def _uniqueRecord(self, kind, catalogValue, accept):
        candidates = [record
            for record in self._candidates(kind, catalogValue)
            if self._crosswalk.catalogValue(record, kind.mapping) == catalogValue
                and (accept is None or accept(record))]
        if len(candidates) != 1:
            return None
        return candidates[0]

    def _candidates(self, kind, catalogValue):
        source = kind.mapping.source('identifier')
        if isinstance(source, Mapped):
            return self._catalogue.findRecordsByField(kind.typeName, source.slug, catalogValue, statusPublished=True)
        return self._catalogue.findRecords([kind.typeName], statusPublished=True)
