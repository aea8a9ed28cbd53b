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

from .oaiutils import checkNoRepeatedArguments, checkNoMoreArguments, checkArgument, oaiFooter, oaiHeader, oaiRequestArgs, OaiException, zuluTime, METADATA_FORMATS
from .oaierror import oaiError


class OaiListMetadataFormats(object):
    """4.4 ListMetadataFormats
Summary and Usage Notes

This verb is used to retrieve the metadata formats available from a repository. An optional argument restricts the request to the formats available for a specific item.
Arguments

    * identifier an optional argument that specifies the unique identifier of the item for which available metadata formats are being requested. If this argument is omitted, then the response includes all metadata formats supported by this repository. Note that the fact that a metadata format is supported by a repository does not mean that it can be disseminated from all items in the repository.

Error and Exception Conditions

    * badArgument - The request includes illegal arguments or is missing required arguments.
    * idDoesNotExist - The value of the identifier argument is unknown or illegal in this repository.
    * noMetadataFormats - There are no metadata formats available for the specified item.
    """

    def __init__(self, repository, selector):
        self._repository = repository
        self._selector = selector

    def listMetadataFormats(self, arguments, **httpkwargs):
        responseDate = zuluTime()
        verb = arguments.get('verb', [None])[0]
        if not verb == 'ListMetadataFormats':
            return
        requestUrl = self._repository.requestUrl(**httpkwargs)

        try:
            validatedArguments = self._validateArguments(arguments)
            identifier = validatedArguments.get('identifier')
            if identifier and self._selector.lookup(identifier) is None:
                raise OaiException('idDoesNotExist')
        except OaiException as e:
            yield from oaiError(e.statusCode, e.additionalMessage, requestUrl=requestUrl)
            return

        yield from oaiHeader(responseDate)
        yield from oaiRequestArgs(arguments, requestUrl=requestUrl)
        yield '<%s>' % verb
        for metadataPrefix, schema, metadataNamespace in METADATA_FORMATS:
            yield '<metadataFormat>'
            yield '<metadataPrefix>%s</metadataPrefix>' % xmlEscape(metadataPrefix)
            yield '<schema>%s</schema>' % xmlEscape(schema)
            yield '<metadataNamespace>%s</metadataNamespace>' % xmlEscape(metadataNamespace)
            yield '</metadataFormat>'
        yield '</%s>' % verb
        yield from oaiFooter()

    def _validateArguments(self, arguments):
        arguments = dict(arguments)
        validatedArguments = {}
        checkNoRepeatedArguments(arguments)
        arguments.pop('verb')
        checkArgument(arguments, 'identifier', validatedArguments)
        checkNoMoreArguments(arguments)
        return validatedArguments
