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

from .catalogue import SETSPEC_PREFIX


class RecordSelector(object):
    """Chooses the (kind, record) pairs a harvester gets to see.

    Only published records of harvestable kinds qualify, and of those only
    the ones that resolve to an identifier and were not explicitly excluded
    from OAI-PMH."""

    def __init__(self, catalogue, crosswalk, identifierResolver):
        self._catalogue = catalogue
        self._crosswalk = crosswalk
        self._identifierResolver = identifierResolver

    def harvestableKinds(self):
        return [kind for kind in self._catalogue.listKinds() if kind.isHarvestable()]

    def select(self, oaiFrom=None, oaiUntil=None, setSpec=None):
        """oaiFrom and oaiUntil are OaiDate instances; only their day is used."""
        kindsByType = dict((kind.typeName, kind) for kind in self.harvestableKinds())
        if not kindsByType:
            return []
        setFilter = None
        if setSpec is not None:
            oaiSet = self.resolveSet(setSpec)
            if oaiSet is None:
                return []
            setFilter = oaiSet.groupingKey
        dateRange = None
        if oaiFrom is not None or oaiUntil is not None:
            dateRange = (oaiFrom and oaiFrom.day(), oaiUntil and oaiUntil.day())
        records = self._catalogue.findRecords(
            kindTypes=list(kindsByType),
            statusPublished=True,
            dateRange=dateRange,
            setFilter=setFilter)
        result = []
        for record in records:
            kind = kindsByType.get(record.typeName)
            if kind is not None and self.isHarvestable(kind, record):
                result.append((kind, record))
        return result

    def lookup(self, identifier):
        return self._identifierResolver.decode(identifier, accept=lambda record: record.isIncluded())

    def isHarvestable(self, kind, record):
        return record.isIncluded() and self._crosswalk.catalogValue(record, kind.mapping) != ''

    def earliestDatestamp(self):
        kindTypes = [kind.typeName for kind in self.harvestableKinds()]
        if not kindTypes:
            return None
        records = self._catalogue.findRecords(kindTypes=kindTypes, statusPublished=True)
        if not records:
            return None
        return min(record.created for record in records)

    def resolveSet(self, setSpec):
        if not setSpec.startswith(SETSPEC_PREFIX):
            return None
        slug = setSpec[len(SETSPEC_PREFIX):]
        for oaiSet in self._catalogue.listSets():
            if oaiSet.slug == slug:
                return oaiSet
        return None

    def setSpecs(self, record):
        setsByKey = dict((oaiSet.groupingKey, oaiSet) for oaiSet in self._catalogue.listSets())
        return sorted(setsByKey[key].setSpec for key in record.collections if key in setsByKey)
