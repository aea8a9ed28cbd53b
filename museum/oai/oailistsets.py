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

from .oaiutils import checkNoRepeatedArguments, checkNoMoreArguments, checkArgument, oaiFooter, oaiHeader, oaiRequestArgs, OaiException, OaiBadArgumentException, zuluTime, OAI_DC_HEADER, OAI_DC_FOOTER
from .oaierror import oaiError


class OaiListSets(object):
    """4.6 ListSets
Summary and Usage Notes

This verb is used to retrieve the set structure of a repository, useful for selective harvesting.
Arguments

    * resumptionToken an exclusive argument with a value that is the flow control token returned by a previous ListSets request that issued an incomplete list.

Error and Exception Conditions

    * badArgument - The request includes illegal arguments or is missing required arguments.
    * badResumptionToken - The value of the resumptionToken argument is invalid or expired.
    * noSetHierarchy - The repository does not support sets."""

    def __init__(self, repository, catalogue):
        self._repository = repository
        self._catalogue = catalogue

    def listSets(self, arguments, **httpkwargs):
        responseDate = zuluTime()
        verb = arguments.get('verb', [None])[0]
        if not verb == 'ListSets':
            return
        requestUrl = self._repository.requestUrl(**httpkwargs)

        try:
            validatedArguments = self._validateArguments(arguments)
            if 'resumptionToken' in validatedArguments:
                raise OaiException('badResumptionToken', 'Resumption tokens are not supported.')

            sets = sorted(self._catalogue.listSets(), key=lambda oaiSet: oaiSet.name)
            if len(sets) == 0:
                raise OaiException('noSetHierarchy')
        except OaiException as e:
            yield from oaiError(e.statusCode, e.additionalMessage, requestUrl=requestUrl)
            return

        yield from oaiHeader(responseDate)
        yield from oaiRequestArgs(arguments, requestUrl=requestUrl)
        yield '<%s>' % verb
        for oaiSet in sets:
            yield '<set>'
            yield '<setSpec>%s</setSpec>' % xmlEscape(oaiSet.setSpec)
            yield '<setName>%s</setName>' % xmlEscape(oaiSet.name)
            if oaiSet.description:
                yield '<setDescription>'
                yield OAI_DC_HEADER
                yield '<dc:description>%s</dc:description>' % xmlEscape(oaiSet.description)
                yield OAI_DC_FOOTER
                yield '</setDescription>'
            yield '</set>'
        yield '</%s>' % verb
        yield from oaiFooter()

    def _validateArguments(self, arguments):
        arguments = dict(arguments)
        validatedArguments = {}
        checkNoRepeatedArguments(arguments)
        arguments.pop('verb')
        if checkArgument(arguments, 'resumptionToken', validatedArguments):
            if len(arguments) > 0:
                raise OaiBadArgumentException('"resumptionToken" argument may only be used exclusively.')
        checkNoMoreArguments(arguments)
        return validatedArguments
