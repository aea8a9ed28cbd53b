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

from oaitestcase import OaiTestCase, xpath, xpathFirst


class OaiListMetadataFormatsTest(OaiTestCase):
    def testListMetadataFormats(self):
        body = self.request(verb=['ListMetadataFormats'])
        formats = xpath(body, '/oai:OAI-PMH/oai:ListMetadataFormats/oai:metadataFormat')
        self.assertEqual(1, len(formats))
        self.assertEqual(['oai_dc'], xpath(formats[0], 'oai:metadataPrefix/text()'))
        self.assertEqual(['http://www.openarchives.org/OAI/2.0/oai_dc.xsd'], xpath(formats[0], 'oai:schema/text()'))
        self.assertEqual(['http://www.openarchives.org/OAI/2.0/oai_dc/'], xpath(formats[0], 'oai:metadataNamespace/text()'))
        self.assertRequestUrl(body)

    def testListMetadataFormatsForIdentifier(self):
        body = self.request(verb=['ListMetadataFormats'], identifier=['photo:P-100'])
        self.assertEqual(['oai_dc'], xpath(body, '//oai:metadataFormat/oai:metadataPrefix/text()'))
        self.assertEqual(['photo:P-100'], xpath(body, '/oai:OAI-PMH/oai:request/@identifier'))

    def testUnknownIdentifier(self):
        self.assertOaiError('idDoesNotExist', self.request(verb=['ListMetadataFormats'], identifier=['museum:A-003']))

    def testIllegalArgument(self):
        body = self.request(verb=['ListMetadataFormats'], metadataPrefix=['oai_dc'])
        self.assertOaiError('badArgument', body)
        self.assertTrue(xpathFirst(body, '//oai:error/text()').endswith('Illegal argument: "metadataPrefix".'))
