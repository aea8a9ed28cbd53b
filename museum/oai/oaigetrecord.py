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

from .oaiutils import checkNoRepeatedArguments, checkNoMoreArguments, checkRequiredArguments, checkMetadataPrefix, oaiFooter, oaiHeader, oaiRequestArgs, OaiException, zuluTime
from .oaierror import oaiError


class OaiGetRecord(object):
    """4.1 GetRecord
Summary and Usage Notes

This verb is used to retrieve an individual metadata record from a repository. Required arguments specify the identifier of the item from which the record is requested and the format of the metadata that should be included in the record.

Arguments

    * identifier a required argument that specifies the unique identifier of the item in the repository from which the record must be disseminated.
    * metadataPrefix a required argument that specifies the metadataPrefix of the format that should be included in the metadata part of the returned record . A record should only be returned if the format specified by the metadataPrefix can be disseminated from the item identified by the value of the identifier argument. The metadata formats supported by a repository and for a particular record can be retrieved using the ListMetadataFormats request.

Error and Exception Conditions

    * badArgument - The request includes illegal arguments or is missing required arguments.
    * cannotDisseminateFormat - The value of the metadataPrefix argument is not supported by the item identified by the value of the identifier argument.
    * idDoesNotExist - The value of the identifier argument is unknown or illegal in this repository.
"""
    def __init__(self, repository, selector, oaiRecord):
        self._repository = repository
        self._selector = selector
        self._oaiRecord = oaiRecord

    def getRecord(self, arguments, **httpkwargs):
        responseDate = zuluTime()
        verb = arguments.get('verb', [None])[0]
        if not verb == 'GetRecord':
            return
        requestUrl = self._repository.requestUrl(**httpkwargs)

        try:
            validatedArguments = self._validateArguments(arguments)
            checkMetadataPrefix(validatedArguments['metadataPrefix'])
            kind, record = self._getRecord(validatedArguments['identifier'])
        except OaiException as e:
            yield from oaiError(e.statusCode, e.additionalMessage, requestUrl=requestUrl)
            return

        yield from oaiHeader(responseDate)
        yield from oaiRequestArgs(arguments, requestUrl=requestUrl)
        yield '<%s>' % verb
        yield from self._oaiRecord.oaiRecord(kind, record)
        yield '</%s>' % verb
        yield from oaiFooter()

    def _getRecord(self, identifier):
        found = self._selector.lookup(identifier)
        if found is None:
            raise OaiException('idDoesNotExist')
        kind, record = found
        if not kind.isHarvestable() or not self._selector.isHarvestable(kind, record):
            raise OaiException('cannotDisseminateFormat', 'No Dublin Core mapping configured for this kind of object.')
        return kind, record

    def _validateArguments(self, arguments):
        arguments = dict(arguments)
        validatedArguments = {}
        checkNoRepeatedArguments(arguments)
        arguments.pop('verb')
        checkRequiredArguments(arguments, ['identifier', 'metadataPrefix'], validatedArguments)
        checkNoMoreArguments(arguments)
        return validatedArguments
