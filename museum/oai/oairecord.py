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

from xml.sax.saxutils import escape as xmlEscape

from .oaiutils import datetime2zulutime, OAI_DC_HEADER, OAI_DC_FOOTER


class OaiRecord(object):
    def __init__(self, crosswalk, selector):
        self._crosswalk = crosswalk
        self._selector = selector

    def oaiRecordHeader(self, kind, record):
        identifier = self._crosswalk.oaiIdentifier(record, kind.mapping)
        yield '<header>'
        yield '<identifier>%s</identifier>' % xmlEscape(identifier)
        yield '<datestamp>%s</datestamp>' % datetime2zulutime(record.created)
        for setSpec in self._selector.setSpecs(record):
            yield '<setSpec>%s</setSpec>' % xmlEscape(setSpec)
        yield '</header>'

    def oaiRecord(self, kind, record):
        yield '<record>'
        yield from self.oaiRecordHeader(kind, record)
        yield '<metadata>'
        yield from self.dublinCore(kind, record)
        yield '</metadata>'
        yield '</record>'

    def dublinCore(self, kind, record):
        yield OAI_DC_HEADER
        for element, values in self._crosswalk.dublinCore(record, kind.mapping):
            for value in values:
                yield '<dc:{0}>{1}</dc:{0}>'.format(element, xmlEscape(value))
        yield OAI_DC_FOOTER
