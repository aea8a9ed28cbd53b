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

from io import StringIO
from unittest.mock import patch

from museum.oai import OaiPmh, MemoryCatalogue
from museum.oai.dublincore import POST_DATE

from oaitestcase import OaiTestCase, xpath, xpathFirst, parseResponse


class OaiPmhTest(OaiTestCase):
    def testNoVerb(self):
        body = self.request()
        self.assertOaiError('badVerb', body)
        self.assertEqual('Value of the verb argument is not a legal OAI-PMH verb, the verb argument is missing, or the verb argument is repeated. No "verb" argument found.', xpathFirst(body, '/oai:OAI-PMH/oai:error/text()'))

    def testEmptyVerb(self):
        self.assertOaiError('badVerb', self.request(verb=['']))

    def testRepeatedVerb(self):
        self.assertOaiError('badVerb', self.request(verb=['Identify', 'Identify']))

    def testIllegalVerb(self):
        body = self.request(verb=['Explain'])
        self.assertOaiError('badVerb', body)
        self.assertTrue('Illegal verb: "Explain".' in xpathFirst(body, '/oai:OAI-PMH/oai:error/text()'))

    def testVerbsAreCaseSensitive(self):
        self.assertOaiError('badVerb', self.request(verb=['identify']))

    def testErrorEchoesNoArguments(self):
        body = self.request(verb=['Explain'], metadataPrefix=['oai_dc'])
        self.assertEqual({}, dict(xpathFirst(body, '/oai:OAI-PMH/oai:request').attrib))
        self.assertRequestUrl(body)

    def testRepeatedArgument(self):
        body = self.request(verb=['ListRecords'], metadataPrefix=['oai_dc', 'oai_dc'])
        self.assertOaiError('badArgument', body)
        self.assertTrue('Argument "metadataPrefix" may not be repeated.' in xpathFirst(body, '/oai:OAI-PMH/oai:error/text()'))

    def testEveryVerbIsAnswered(self):
        for verb, arguments in [
                ('Identify', {}),
                ('ListMetadataFormats', {}),
                ('ListSets', {}),
                ('ListIdentifiers', {'metadataPrefix': ['oai_dc']}),
                ('ListRecords', {'metadataPrefix': ['oai_dc']}),
                ('GetRecord', {'metadataPrefix': ['oai_dc'], 'identifier': ['museum:A-001']}),
            ]:
            body = self.request(verb=[verb], **arguments)
            self.assertEqual([], xpath(body, '/oai:OAI-PMH/oai:error'), verb)
            self.assertEqual(1, len(xpath(body, '/oai:OAI-PMH/oai:%s' % verb)), verb)
            self.assertEqual([verb], xpath(body, '/oai:OAI-PMH/oai:request/@verb'))

    def testExternalUrl(self):
        oaiPmh = OaiPmh(repositoryName='The Museum', adminEmail='info@museum.example.org', catalogue=self.catalogue, externalUrl='https://museum.example.org/oai')
        body = parseResponse(oaiPmh.handleRequest(Method='GET', arguments={'verb': ['Identify']}, **self.httpkwargs))
        self.assertEqual(['https://museum.example.org/oai'], xpath(body, '/oai:OAI-PMH/oai:request/text()'))
        self.assertEqual(['https://museum.example.org/oai'], xpath(body, '/oai:OAI-PMH/oai:Identify/oai:baseURL/text()'))

    def testUpdateRepositoryInfo(self):
        self.oaiPmh.updateRepositoryInfo(name='Another Museum')
        body = self.request(verb=['Identify'])
        self.assertEqual(['Another Museum'], xpath(body, '//oai:Identify/oai:repositoryName/text()'))
        self.assertEqual(['info@museum.example.org'], xpath(body, '//oai:Identify/oai:adminEmail/text()'))
        self.oaiPmh.updateRepositoryInfo(adminEmail='collections@museum.example.org')
        body = self.request(verb=['Identify'])
        self.assertEqual(['collections@museum.example.org'], xpath(body, '//oai:Identify/oai:adminEmail/text()'))

    def testUnexpectedFailureIsBadArgument(self):
        class BrokenCatalogue(MemoryCatalogue):
            def listKinds(self):
                raise RuntimeError('catalogue unavailable')
        oaiPmh = OaiPmh(repositoryName='The Museum', adminEmail='info@museum.example.org', catalogue=BrokenCatalogue())
        with patch('sys.stderr', new_callable=StringIO) as stderr:
            body = parseResponse(oaiPmh.handleRequest(Method='GET', arguments={'verb': ['Identify']}, **self.httpkwargs))
        self.assertOaiError('badArgument', body)
        self.assertTrue('Internal server error.' in xpathFirst(body, '/oai:OAI-PMH/oai:error/text()'))
        self.assertTrue('RuntimeError: catalogue unavailable' in stderr.getvalue(), stderr.getvalue())

    def testFailureWhileRenderingEmitsOnlyTheError(self):
        catalogue = self.catalogue
        getWellKnownAttribute = catalogue.getWellKnownAttribute
        def brokenWellKnownAttribute(record, attrName):
            if attrName == POST_DATE:
                raise ValueError('no date')
            return getWellKnownAttribute(record, attrName)
        catalogue.getWellKnownAttribute = brokenWellKnownAttribute
        with patch('sys.stderr', new_callable=StringIO):
            body = self.request(verb=['ListRecords'], metadataPrefix=['oai_dc'])
        self.assertOaiError('badArgument', body)
        self.assertEqual([], xpath(body, '//oai:ListRecords'))
        self.assertEqual(1, len(xpath(body, '/oai:OAI-PMH/oai:responseDate')))


class HttpPostOaiPmhTest(OaiTestCase):
    def post(self, arguments, Body):
        return parseResponse(self.oaiPmh.handleRequest(Method='POST', arguments=arguments, Body=Body, **self.httpkwargs))

    def testBodyArguments(self):
        body = self.post({}, b'verb=GetRecord&metadataPrefix=oai_dc&identifier=museum%3AA-001')
        self.assertEqual(['museum:A-001'], xpath(body, '//oai:GetRecord/oai:record/oai:header/oai:identifier/text()'))

    def testBodyOverridesQueryArguments(self):
        body = self.post({'verb': ['ListSets']}, 'verb=Identify')
        self.assertEqual(1, len(xpath(body, '/oai:OAI-PMH/oai:Identify')))

    def testBodyAndQueryArgumentsAreMerged(self):
        body = self.post({'metadataPrefix': ['oai_dc']}, 'verb=ListIdentifiers')
        self.assertEqual(['museum:A-001', 'photo:P-100', 'museum:A-002'], xpath(body, '//oai:ListIdentifiers/oai:header/oai:identifier/text()'))

    def testRepeatedArgumentInBody(self):
        body = self.post({}, 'verb=ListRecords&metadataPrefix=oai_dc&metadataPrefix=oai_dc')
        self.assertOaiError('badArgument', body)

    def testEmptyBody(self):
        self.assertOaiError('badVerb', self.post({}, b''))
