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
import sys

from simplejson import load

from .dublincore import DublinCoreMapping, POST_TITLE, POST_EXCERPT, POST_AUTHOR, POST_DATE, POST_PERMALINK, POST_ID

PUBLISHED = 'publish'
SETSPEC_PREFIX = 'collection:'


class Field(object):
    def __init__(self, id, slug, name=None):
        self.id = id
        self.slug = slug
        self.name = name or slug


class Kind(object):
    def __init__(self, id, typeName, label=None, fields=None, mapping=None):
        self.id = id
        self.typeName = typeName
        self.label = label or typeName
        self.fields = list(fields or [])
        self.mapping = DublinCoreMapping.withDefaults() if mapping is None else mapping

    def isHarvestable(self):
        return self.mapping.mappingCount() > 0

    def __repr__(self):
        return 'Kind(%r, %r)' % (self.id, self.typeName)


class CatalogueSet(object):
    def __init__(self, slug, name, description='', groupingKey=None):
        self.slug = slug
        self.name = name
        self.description = description or ''
        self.groupingKey = slug if groupingKey is None else groupingKey

    @property
    def setSpec(self):
        return SETSPEC_PREFIX + self.slug


class CatalogueRecord(object):
    """includeInOai is three-valued: True, False or None (not set, which
    counts as included)."""

    def __init__(self, id, typeName, created, modified=None, title='', excerpt='', author='', permalink='', status=PUBLISHED, fields=None, collections=None, includeInOai=None):
        self.id = id
        self.typeName = typeName
        self.created = created
        self.modified = created if modified is None else modified
        self.title = title
        self.excerpt = excerpt
        self.author = author
        self.permalink = permalink
        self.status = status
        self.fields = dict(fields or {})
        self.collections = list(collections or [])
        self.includeInOai = includeInOai

    def isIncluded(self):
        return self.includeInOai is not False

    def __repr__(self):
        return 'CatalogueRecord(%r, %r)' % (self.id, self.typeName)


class MemoryCatalogue(object):
    """Content store kept in memory. Provides the queries the OAI-PMH
    engine needs: listKinds, listSets, findRecords, findRecordsByField,
    getFieldValue and getWellKnownAttribute."""

    def __init__(self, kinds=None, sets=None, records=None, kindConfiguration=None):
        self._kinds = list(kinds or [])
        self._sets = list(sets or [])
        self._records = list(records or [])
        self._kindConfiguration = kindConfiguration

    def addKind(self, kind):
        self._kinds.append(kind)

    def removeKind(self, kind):
        self._kinds.remove(kind)

    def addSet(self, aSet):
        self._sets.append(aSet)

    def addRecord(self, record):
        self._records.append(record)

    def listKinds(self):
        if self._kindConfiguration is not None:
            for kind in self._kinds:
                kind.mapping = self._kindConfiguration.getMapping(kind)
        return list(self._kinds)

    def listSets(self):
        return list(self._sets)

    def findRecords(self, kindTypes, statusPublished=True, dateRange=None, setFilter=None):
        """dateRange is a (from, until) pair of YYYY-MM-DD strings, either may
        be None; both bounds are inclusive and compared with the day of
        modification."""
        kindTypes = set(kindTypes)
        oaiFrom, oaiUntil = dateRange or (None, None)
        result = []
        for record in self._records:
            if record.typeName not in kindTypes:
                continue
            if statusPublished and record.status != PUBLISHED:
                continue
            day = record.modified.strftime('%Y-%m-%d')
            if oaiFrom and day < oaiFrom:
                continue
            if oaiUntil and day > oaiUntil:
                continue
            if setFilter is not None and setFilter not in record.collections:
                continue
            result.append(record)
        return sorted(result, key=lambda record: record.modified)

    def findRecordsByField(self, kindType, slug, value, statusPublished=True):
        result = []
        for record in self.findRecords([kindType], statusPublished=statusPublished):
            if value in _asTexts(self.getFieldValue(record, slug)) or self.getWellKnownAttribute(record, slug) == value:
                result.append(record)
        return result

    def getFieldValue(self, record, slug):
        return record.fields.get(slug, '')

    def getWellKnownAttribute(self, record, attrName):
        if attrName == POST_TITLE:
            return record.title
        if attrName == POST_EXCERPT:
            return record.excerpt
        if attrName == POST_AUTHOR:
            return record.author
        if attrName == POST_DATE:
            return record.created.strftime('%Y-%m-%d %H:%M:%S')
        if attrName == POST_PERMALINK:
            return record.permalink
        if attrName == POST_ID:
            return str(record.id)
        return ''

    @classmethod
    def fromDict(cls, data, kindConfiguration=None):
        catalogue = cls(kindConfiguration=kindConfiguration)
        for kindData in data.get('kinds', []):
            catalogue.addKind(_kindFromDict(kindData))
        for setData in data.get('sets', []):
            catalogue.addSet(CatalogueSet(
                slug=setData['slug'],
                name=setData.get('name', setData['slug']),
                description=setData.get('description', ''),
                groupingKey=setData.get('groupingKey')))
        typeNames = set(kind.typeName for kind in catalogue._kinds)
        for recordData in data.get('records', []):
            if recordData.get('typeName') not in typeNames:
                sys.stderr.write("Skipping record %s of unknown kind %s\n" % (recordData.get('id'), recordData.get('typeName')))
                sys.stderr.flush()
                continue
            catalogue.addRecord(_recordFromDict(recordData))
        return catalogue

    @classmethod
    def fromFile(cls, filename, kindConfiguration=None):
        with open(filename) as f:
            return cls.fromDict(load(f), kindConfiguration=kindConfiguration)


def _kindFromDict(data):
    mapping = data.get('oai_pmh_mappings')
    if isinstance(mapping, str):
        mapping = DublinCoreMapping.fromJson(mapping)
    elif isinstance(mapping, dict):
        mapping = DublinCoreMapping.fromDict(mapping)
    return Kind(
        id=data['id'],
        typeName=data['typeName'],
        label=data.get('label'),
        fields=[Field(id=f.get('id', f['slug']), slug=f['slug'], name=f.get('name')) for f in data.get('fields', [])],
        mapping=mapping)

def _recordFromDict(data):
    created = parseTimestamp(data['created'])
    return CatalogueRecord(
        id=data['id'],
        typeName=data['typeName'],
        created=created,
        modified=parseTimestamp(data['modified']) if data.get('modified') else created,
        title=data.get('title', ''),
        excerpt=data.get('excerpt', ''),
        author=data.get('author', ''),
        permalink=data.get('permalink', ''),
        status=data.get('status', PUBLISHED),
        fields=data.get('fields'),
        collections=data.get('collections'),
        includeInOai=data.get('includeInOai'))

def parseTimestamp(value):
    for format in ['%Y-%m-%dT%H:%M:%SZ', '%Y-%m-%d %H:%M:%S', '%Y-%m-%d']:
        try:
            return datetime.strptime(value, format)
        except ValueError:
            pass
    raise ValueError('Unsupported timestamp "%s"' % value)

def _asTexts(value):
    if not isinstance(value, (list, tuple)):
        value = [value]
    return [str(v) for v in value if v is not None]
