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

from datetime import datetime
from io import StringIO
from os.path import join
from shutil import rmtree
from tempfile import mkdtemp
from unittest import TestCase
from unittest.mock import patch

from simplejson import dump
from lxml.etree import XML

from museum.oai import OaiPmh, MemoryCatalogue, KindConfiguration, DublinCoreMapping
from museum.oai.catalogue import parseTimestamp
from museum.oai.dublincore import Mapped

from oaitestcase import createCatalogue, artefactKind, xpath


CATALOGUE = {
    'kinds': [
        {'id': 1, 'typeName': 'artefact', 'label': 'Artefact',
            'fields': [{'id': 11, 'slug': 'accession_number', 'name': 'Accession number'}],
            'oai_pmh_mappings': '{"identifier": "accession_number", "title": {"field": "wp_post_title", "staticValue": ""}, "identifier_prefix": "museum:"}'},
        {'id': 2, 'typeName': 'photo'},
    ],
    'sets': [
        {'slug': 'ceramics', 'name': 'Ceramics', 'description': 'Pots'},
        {'slug': 'textiles'},
    ],
    'records': [
        {'id': 101, 'typeName': 'artefact', 'created': '2023-01-10 09:00:00', 'title': 'Bowl', 'fields': {'accession_number': 'A-001'}, 'collections': ['ceramics']},
        {'id': 201, 'typeName': 'photo', 'created': '2023-04-20T08:00:00Z', 'modified': '2023-05-01', 'status': 'draft'},
        {'id': 301, 'typeName': 'letter', 'created': '2023-05-01'},
    ],
}


class MemoryCatalogueTest(TestCase):
    def setUp(self):
        TestCase.setUp(self)
        self.tempdir = mkdtemp()

    def tearDown(self):
        rmtree(self.tempdir)
        TestCase.tearDown(self)

    def testFromDict(self):
        with patch('sys.stderr', new_callable=StringIO) as stderr:
            catalogue = MemoryCatalogue.fromDict(CATALOGUE)
        self.assertEqual('Skipping record 301 of unknown kind letter\n', stderr.getvalue())
        artefact, photo = catalogue.listKinds()
        self.assertEqual('museum:', artefact.mapping.identifierPrefix)
        self.assertEqual(Mapped('accession_number'), artefact.mapping.source('identifier'))
        self.assertEqual(['accession_number'], [field.slug for field in artefact.fields])
        self.assertEqual(DublinCoreMapping.withDefaults(), photo.mapping)
        self.assertEqual('photo', photo.label)
        ceramics, textiles = catalogue.listSets()
        self.assertEqual('collection:ceramics', ceramics.setSpec)
        self.assertEqual('textiles', textiles.name)
        self.assertEqual('textiles', textiles.groupingKey)

    def testFromFile(self):
        filename = join(self.tempdir, 'catalogue.json')
        with open(filename, 'w') as f:
            dump(CATALOGUE, f)
        with patch('sys.stderr', new_callable=StringIO):
            catalogue = MemoryCatalogue.fromFile(filename)
        records = catalogue.findRecords(['artefact', 'photo'], statusPublished=False)
        self.assertEqual([101, 201], [record.id for record in records])
        self.assertEqual(datetime(2023, 5, 1), records[1].modified)
        self.assertEqual(datetime(2023, 1, 10, 9, 0, 0), records[0].modified)

    def testFindRecords(self):
        catalogue = createCatalogue()
        self.assertEqual([101, 104, 105, 102], [r.id for r in catalogue.findRecords(['artefact'])])
        self.assertEqual([101, 103, 104, 105, 102], [r.id for r in catalogue.findRecords(['artefact'], statusPublished=False)])
        self.assertEqual([101, 102], [r.id for r in catalogue.findRecords(['artefact'], setFilter='ceramics')])

    def testFindRecordsDateRangeIsInclusive(self):
        catalogue = createCatalogue()
        self.assertEqual([104], [r.id for r in catalogue.findRecords(['artefact'], dateRange=('2023-03-05', '2023-03-05'))])
        self.assertEqual([105, 102], [r.id for r in catalogue.findRecords(['artefact'], dateRange=('2023-03-10', None))])
        self.assertEqual([101], [r.id for r in catalogue.findRecords(['artefact'], dateRange=(None, '2023-01-10'))])

    def testFindRecordsByField(self):
        catalogue = createCatalogue()
        self.assertEqual([102], [r.id for r in catalogue.findRecordsByField('artefact', 'accession_number', 'A-002')])
        self.assertEqual([], catalogue.findRecordsByField('artefact', 'accession_number', 'A-003'))
        self.assertEqual([103], [r.id for r in catalogue.findRecordsByField('artefact', 'accession_number', 'A-003', statusPublished=False)])
        self.assertEqual([101], [r.id for r in catalogue.findRecordsByField('artefact', 'wp_post_id', '101')])

    def testWellKnownAttributes(self):
        catalogue = createCatalogue()
        record = catalogue.findRecordsByField('artefact', 'accession_number', 'A-001')[0]
        self.assertEqual('Bowl <blue>', catalogue.getWellKnownAttribute(record, 'wp_post_title'))
        self.assertEqual('2023-01-10 09:00:00', catalogue.getWellKnownAttribute(record, 'wp_post_date'))
        self.assertEqual('https://museum.example.org/bowl', catalogue.getWellKnownAttribute(record, 'wp_post_permalink'))
        self.assertEqual('101', catalogue.getWellKnownAttribute(record, 'wp_post_id'))
        self.assertEqual('', catalogue.getWellKnownAttribute(record, 'wp_post_modified'))
        self.assertEqual(['clay', 'glaze'], catalogue.getFieldValue(record, 'materials'))
        self.assertEqual('', catalogue.getFieldValue(record, 'width'))

    def testMappingsFromKindConfiguration(self):
        configuration = KindConfiguration(join(self.tempdir, 'mappings.json'), siteUrl='https://www.museum.example.org')
        catalogue = MemoryCatalogue(kinds=[artefactKind()], kindConfiguration=configuration)
        artefact = catalogue.listKinds()[0]
        self.assertEqual('museum-example-org:', artefact.mapping.identifierPrefix)
        self.assertEqual(Mapped('wp_post_id'), artefact.mapping.source('identifier'))

    def testIncludeInOai(self):
        catalogue = createCatalogue()
        included = dict((r.id, r.isIncluded()) for r in catalogue.findRecords(['artefact'], statusPublished=False))
        self.assertEqual({101: True, 102: True, 103: True, 104: False, 105: True}, included)

    def testParseTimestamp(self):
        self.assertEqual(datetime(2023, 1, 10, 9, 0, 0), parseTimestamp('2023-01-10T09:00:00Z'))
        self.assertEqual(datetime(2023, 1, 10, 9, 0, 0), parseTimestamp('2023-01-10 09:00:00'))
        self.assertEqual(datetime(2023, 1, 10), parseTimestamp('2023-01-10'))
        self.assertRaises(ValueError, lambda: parseTimestamp('10 January 2023'))

    def testStoredMappingWithWellKnownSlugs(self):
        catalogue = MemoryCatalogue.fromDict({
            'kinds': [{'id': 1, 'typeName': 'artefact',
                'oai_pmh_mappings': '{"title": {"field": "wp_post_title"}, "identifier": {"field": "wp_post_id"}, "identifier_prefix": "m:"}'}],
            'records': [{'id': 7, 'typeName': 'artefact', 'created': '2023-01-10', 'title': 'Bowl'}],
        })
        oaiPmh = OaiPmh(repositoryName='The Museum', adminEmail='info@museum.example.org', catalogue=catalogue)
        body = XML(''.join(oaiPmh.handleRequest(Method='GET', arguments={'verb': ['ListRecords'], 'metadataPrefix': ['oai_dc']})).encode('utf-8'))
        self.assertEqual(['m:7'], xpath(body, '//oai:record/oai:header/oai:identifier/text()'))
        self.assertEqual(['Bowl'], xpath(body, '//oai:record/oai:metadata/oai_dc:dc/dc:title/text()'))

    def testFindRecordsByListField(self):
        catalogue = createCatalogue()
        self.assertEqual([101], [r.id for r in catalogue.findRecordsByField('artefact', 'materials', 'glaze')])
        self.assertEqual([], catalogue.findRecordsByField('artefact', 'materials', 'stone'))
