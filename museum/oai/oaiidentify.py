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

from .oaiutils import checkNoRepeatedArguments, checkNoMoreArguments, oaiFooter, oaiHeader, oaiRequestArgs, OaiException, zuluTime, datetime2zulutime
from .oaierror import oaiError


class OaiIdentify(object):
    """4.2 Identify
Summary and Usage Notes

This verb is used to retrieve information about a repository. Some of the information returned is required as part of the OAI-PMH. Repositories may also employ the Identify verb to return additional descriptive information.
Arguments

None

Error and Exception Conditions

    * badArgument - The request includes illegal arguments."""

    def __init__(self, repository, selector):
        self._repository = repository
        self._selector = selector

    def identify(self, arguments, **httpkwargs):
        responseDate = zuluTime()
        verb = arguments.get('verb', [None])[0]
        if not verb == 'Identify':
            return
        requestUrl = self._repository.requestUrl(**httpkwargs)

        try:
            self._validateArguments(arguments)
        except OaiException as e:
            yield from oaiError(e.statusCode, e.additionalMessage, requestUrl=requestUrl)
            return

        earliest = self._selector.earliestDatestamp()
        earliestDatestamp = responseDate if earliest is None else datetime2zulutime(earliest)

        yield from oaiHeader(responseDate)
        yield from oaiRequestArgs(arguments, requestUrl=requestUrl)
        yield '<%s>' % verb
        yield '<repositoryName>%s</repositoryName>' % xmlEscape(self._repository.name)
        yield '<baseURL>%s</baseURL>' % xmlEscape(requestUrl)
        yield '<protocolVersion>2.0</protocolVersion>'
        yield '<adminEmail>%s</adminEmail>' % xmlEscape(self._repository.adminEmail)
        yield '<earliestDatestamp>%s</earliestDatestamp>' % earliestDatestamp
        yield '<deletedRecord>no</deletedRecord>'
        yield '<granularity>YYYY-MM-DDThh:mm:ssZ</granularity>'
        yield '</%s>' % verb
        yield from oaiFooter()

    def _validateArguments(self, arguments):
        arguments = dict(arguments)
        checkNoRepeatedArguments(arguments)
        arguments.pop('verb')
        checkNoMoreArguments(arguments)
