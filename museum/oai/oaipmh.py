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

from urllib.parse import parse_qs
from traceback import print_exc
import sys

from .crosswalk import Crosswalk
from .oaiidentifier import IdentifierResolver
from .oaiselect import RecordSelector
from .oaiidentify import OaiIdentify
from .oailist import OaiList
from .oaigetrecord import OaiGetRecord
from .oailistmetadataformats import OaiListMetadataFormats
from .oailistsets import OaiListSets
from .oaierror import oaiError
from .oairecord import OaiRecord
from .oairepository import OaiRepository


class OaiPmh(object):
    """OAI-PMH 2.0 endpoint over a catalogue.

    The catalogue is the content store: it lists kinds (with their Dublin
    Core mappings) and sets, and finds records. handleRequest answers one
    request with the complete XML document, produced as a sequence of
    strings."""

    def __init__(self, repositoryName, adminEmail, catalogue, externalUrl=None):
        self._repository = OaiRepository(
            name=repositoryName,
            adminEmail=adminEmail,
            externalUrl=externalUrl,
        )
        crosswalk = Crosswalk(catalogue)
        identifierResolver = IdentifierResolver(catalogue, crosswalk)
        self._selector = RecordSelector(catalogue, crosswalk=crosswalk, identifierResolver=identifierResolver)
        oaiRecord = OaiRecord(crosswalk=crosswalk, selector=self._selector)
        oaiList = OaiList(repository=self._repository, selector=self._selector, oaiRecord=oaiRecord)
        self._verbs = {
            'Identify': OaiIdentify(self._repository, self._selector).identify,
            'ListMetadataFormats': OaiListMetadataFormats(self._repository, self._selector).listMetadataFormats,
            'ListSets': OaiListSets(self._repository, catalogue).listSets,
            'GetRecord': OaiGetRecord(self._repository, self._selector, oaiRecord).getRecord,
            'ListIdentifiers': oaiList.listIdentifiers,
            'ListRecords': oaiList.listRecords,
        }

    def updateRepositoryInfo(self, name=None, adminEmail=None):
        if name is not None:
            self._repository.updateName(name=name)
        if adminEmail is not None:
            self._repository.updateAdminEmail(adminEmail=adminEmail)

    def handleRequest(self, Method, arguments, Body=None, **kwargs):
        """arguments maps names to lists of values, as parse_qs returns them.
        For a POST the urlencoded Body is merged in; a name present in both
        takes the Body's values."""
        arguments = dict(arguments)
        if Method == 'POST' and Body:
            if isinstance(Body, bytes):
                Body = Body.decode('utf-8')
            arguments.update(parse_qs(Body, keep_blank_values=True))
        yield from self._handle(arguments, **kwargs)

    def _handle(self, arguments, **httpkwargs):
        requestUrl = self._repository.requestUrl(**httpkwargs)
        verbs = arguments.get('verb', [])
        if not verbs or not verbs[0]:
            yield from oaiError('badVerb', 'No "verb" argument found.', requestUrl=requestUrl)
            return
        if len(verbs) > 1:
            yield from oaiError('badVerb', 'Argument "verb" may not be repeated.', requestUrl=requestUrl)
            return
        verb = verbs[0]
        if verb not in self._verbs:
            yield from oaiError('badVerb', 'Illegal verb: "%s".' % verb, requestUrl=requestUrl)
            return

        try:
            response = list(self._verbs[verb](arguments=arguments, **httpkwargs))
        except Exception:
            print_exc()
            sys.stderr.write("OAI-PMH %s request failed, answered with badArgument\n" % verb)
            sys.stderr.flush()
            response = list(oaiError('badArgument', 'Internal server error.', requestUrl=requestUrl))
        yield from response
