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

from .oaiutils import checkNoRepeatedArguments, checkNoMoreArguments, checkArgument, checkRequiredArguments, checkMetadataPrefix, OaiBadArgumentException, oaiFooter, oaiHeader, oaiRequestArgs, OaiException, zuluTime, OaiDate, OaiDateException
from .oaierror import oaiError


class OaiList(object):
    """4.3 ListIdentifiers
Summary and Usage Notes

This verb is an abbreviated form of ListRecords, retrieving only headers rather than records. Optional arguments permit selective harvesting of headers based on set membership and/or datestamp.
Arguments

    * from an optional argument with a UTCdatetime value, which specifies a lower bound for datestamp-based selective harvesting.
    * until an optional argument with a UTCdatetime value, which specifies a upper bound for datestamp-based selective harvesting.
    * metadataPrefix a required argument, which specifies that headers should be returned only if the metadata format matching the supplied metadataPrefix is available. The metadata formats supported by a repository and for a particular item can be retrieved using the ListMetadataFormats request.
    * set an optional argument with a setSpec value , which specifies set criteria for selective harvesting.
    * resumptionToken an exclusive argument with a value that is the flow control token returned by a previous ListIdentifiers request that issued an incomplete list.

Error and Exception Conditions

    * badArgument - The request includes illegal arguments or is missing required arguments.
    * badResumptionToken - The value of the resumptionToken argument is invalid or expired.
    * cannotDisseminateFormat - The value of the metadataPrefix argument is not supported by the repository.
    * noRecordsMatch- The combination of the values of the from, until, and set arguments results in an empty list.

4.5 ListRecords
Summary and Usage Notes

This verb is used to harvest records from a repository. Optional arguments permit selective harvesting of records based on set membership and/or datestamp.
Arguments

    * from an optional argument with a UTCdatetime value, which specifies a lower bound for datestamp-based selective harvesting.
    * until an optional argument with a UTCdatetime value, which specifies a upper bound for datestamp-based selective harvesting.
    * set an optional argument with a setSpec value , which specifies set criteria for selective harvesting.
    * resumptionToken an exclusive argument with a value that is the flow control token returned by a previous ListRecords request that issued an incomplete list.
    * metadataPrefix a required argument (unless the exclusive argument resumptionToken is used) that specifies the metadataPrefix of the format that should be included in the metadata part of the returned records.

Error and Exception Conditions

    * badArgument - The request includes illegal arguments or is missing required arguments.
    * badResumptionToken - The value of the resumptionToken argument is invalid or expired.
    * cannotDisseminateFormat - The value of the metadataPrefix argument is not supported by the repository.
    * noRecordsMatch - The combination of the values of the from, until, set and metadataPrefix arguments results in an empty list.

Lists are never split, so no resumptionToken is ever handed out and every
resumptionToken received is answered with badResumptionToken.
"""

    def __init__(self, repository, selector, oaiRecord):
        self._supportedVerbs = ['ListIdentifiers', 'ListRecords']
        self._repository = repository
        self._selector = selector
        self._oaiRecord = oaiRecord

    def listRecords(self, arguments, **httpkwargs):
        yield from self._list(arguments, **httpkwargs)

    def listIdentifiers(self, arguments, **httpkwargs):
        yield from self._list(arguments, **httpkwargs)

    def _list(self, requestArguments, **httpkwargs):
        responseDate = zuluTime()
        verb = requestArguments.get('verb', [None])[0]
        if not verb in self._supportedVerbs:
            return
        requestUrl = self._repository.requestUrl(**httpkwargs)

        try:
            selectArguments = self._validateAndParseArguments(requestArguments)
            result = self._select(**selectArguments)
        except OaiException as e:
            yield from oaiError(e.statusCode, e.additionalMessage, requestUrl=requestUrl)
            return

        yield from oaiHeader(responseDate)
        yield from oaiRequestArgs(requestArguments, requestUrl=requestUrl)
        yield '<%s>' % verb
        render = self._oaiRecord.oaiRecord if verb == 'ListRecords' else self._oaiRecord.oaiRecordHeader
        for kind, record in result:
            yield from render(kind, record)
        yield '</%s>' % verb
        yield from oaiFooter()

    def _validateAndParseArguments(self, arguments):
        selectArguments = {}
        arguments = dict(arguments)
        checkNoRepeatedArguments(arguments)
        arguments.pop('verb')
        if checkArgument(arguments, 'resumptionToken', selectArguments):
            if len(arguments) > 0:
                raise OaiBadArgumentException('"resumptionToken" argument may only be used exclusively.')
            raise OaiException('badResumptionToken', 'Resumption tokens are not supported.')

        checkRequiredArguments(arguments, ['metadataPrefix'], selectArguments)
        for name in ['from', 'until', 'set']:
            checkArgument(arguments, name, selectArguments)
        checkNoMoreArguments(arguments)

        checkMetadataPrefix(selectArguments['metadataPrefix'])
        from_ = selectArguments.get('from') or None
        until = selectArguments.get('until') or None
        try:
            from_ = from_ and OaiDate(from_)
            until = until and OaiDate(until)
        except OaiDateException as e:
            raise OaiBadArgumentException('From and/or until arguments are faulty: "%s".' % e)
        if from_ and until and from_.isShort() != until.isShort():
            raise OaiBadArgumentException('From and/or until arguments must match in length.')

        return dict(
            oaiFrom=from_,
            oaiUntil=until,
            setSpec=selectArguments.get('set') or None,
        )

    def _select(self, oaiFrom, oaiUntil, setSpec):
        result = self._selector.select(oaiFrom=oaiFrom, oaiUntil=oaiUntil, setSpec=setSpec)
        if len(result) == 0:
            raise OaiException('noRecordsMatch')
        return result
