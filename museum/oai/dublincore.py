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

from collections import namedtuple
from urllib.parse import urlsplit
import re
import sys

from simplejson import dumps, loads, JSONDecodeError


DC_ELEMENTS = [
    'title',
    'creator',
    'subject',
    'description',
    'publisher',
    'contributor',
    'date',
    'type',
    'format',
    'identifier',
    'source',
    'language',
    'relation',
    'coverage',
    'rights',
]

POST_TITLE = 'wp_post_title'
POST_EXCERPT = 'wp_post_excerpt'
POST_AUTHOR = 'wp_post_author'
POST_DATE = 'wp_post_date'
POST_PERMALINK = 'wp_post_permalink'
POST_ID = 'wp_post_id'

WELL_KNOWN_ATTRIBUTES = [POST_TITLE, POST_EXCERPT, POST_AUTHOR, POST_DATE, POST_PERMALINK, POST_ID]

DEFAULT_FIELDS = {
    'title': POST_TITLE,
    'creator': POST_AUTHOR,
    'description': POST_EXCERPT,
    'date': POST_DATE,
    'source': POST_PERMALINK,
    'identifier': POST_ID,
}

IDENTIFIER_PREFIX_KEY = 'identifier_prefix'

# Where the value of one element comes from.
Static = namedtuple('Static', ['value'])
Mapped = namedtuple('Mapped', ['slug'])
Unset = namedtuple('Unset', [])
UNSET = Unset()


class ElementMapping(object):
    def __init__(self, field='', staticValue=''):
        self.field = (field or '').strip()
        self.staticValue = (staticValue or '').strip()

    def source(self):
        if self.staticValue:
            return Static(self.staticValue)
        if self.field:
            return Mapped(self.field)
        return UNSET

    def isSet(self):
        return bool(self.field or self.staticValue)

    def asDict(self):
        return {'field': self.field, 'staticValue': self.staticValue}

    @classmethod
    def fromValue(cls, value):
        """A bare string is the older notation for a field slug."""
        if isinstance(value, ElementMapping):
            return cls(value.field, value.staticValue)
        if isinstance(value, str):
            return cls(field=value)
        if isinstance(value, dict):
            return cls(field=value.get('field') or '', staticValue=value.get('staticValue') or '')
        return cls()

    def __eq__(self, other):
        return isinstance(other, ElementMapping) and self.asDict() == other.asDict()

    def __repr__(self):
        return 'ElementMapping(field=%r, staticValue=%r)' % (self.field, self.staticValue)


class DublinCoreMapping(object):
    """Crosswalk of one kind onto the 15 Dublin Core elements, plus the
    prefix that turns a catalog value into an OAI identifier."""

    def __init__(self, identifierPrefix='', **elements):
        self._elements = dict((element, ElementMapping()) for element in DC_ELEMENTS)
        for element, value in elements.items():
            self.setMapping(element, value)
        self.identifierPrefix = (identifierPrefix or '').strip()

    @classmethod
    def withDefaults(cls, siteUrl=None):
        return cls(
            identifierPrefix=defaultIdentifierPrefix(siteUrl),
            **dict((element, ElementMapping(field=field)) for element, field in DEFAULT_FIELDS.items()))

    @classmethod
    def fromDict(cls, data):
        mapping = cls()
        if not isinstance(data, dict):
            return mapping
        for element in DC_ELEMENTS:
            if element in data:
                mapping.setMapping(element, data[element])
        if isinstance(data.get(IDENTIFIER_PREFIX_KEY), str):
            mapping.identifierPrefix = data[IDENTIFIER_PREFIX_KEY].strip()
        return mapping

    @classmethod
    def fromJson(cls, jsonString):
        if not jsonString:
            return cls()
        try:
            data = loads(jsonString)
        except JSONDecodeError as e:
            sys.stderr.write("Ignoring malformed Dublin Core mapping: %s\n" % e)
            sys.stderr.flush()
            return cls()
        return cls.fromDict(data)

    def setMapping(self, element, value):
        if element not in self._elements:
            raise ValueError('Unknown Dublin Core element "%s"' % element)
        self._elements[element] = ElementMapping.fromValue(value)

    def getMapping(self, element):
        return self._elements.get(element)

    def removeMapping(self, element):
        if element in self._elements:
            self._elements[element] = ElementMapping()

    def clearMappings(self):
        for element in DC_ELEMENTS:
            self._elements[element] = ElementMapping()
        self.identifierPrefix = ''

    def hasMapping(self, element):
        return element in self._elements and self._elements[element].isSet()

    def mappingCount(self):
        return sum(1 for element in DC_ELEMENTS if self._elements[element].isSet())

    def source(self, element):
        return self._elements[element].source()

    def asDict(self):
        result = dict((element, self._elements[element].asDict()) for element in DC_ELEMENTS)
        result[IDENTIFIER_PREFIX_KEY] = self.identifierPrefix
        return result

    def asJson(self):
        return dumps(self.asDict())

    def __eq__(self, other):
        return isinstance(other, DublinCoreMapping) and self.asDict() == other.asDict()

    def __repr__(self):
        return 'DublinCoreMapping(%r)' % self.asDict()


def validateMapping(mapping, kindFields=()):
    """Returns a list of human readable problems, empty when the mapping can
    be saved. kindFields are field descriptors (objects or dicts) with a
    slug."""
    available = set(_slug(field) for field in kindFields)
    available.update(WELL_KNOWN_ATTRIBUTES)
    errors = []
    for element in DC_ELEMENTS:
        elementMapping = mapping.getMapping(element)
        if elementMapping.field and elementMapping.staticValue:
            errors.append('Dublin Core element "%s" has both a mapped field and a static value set, choose one.' % element)
        if elementMapping.field and elementMapping.field not in available:
            errors.append('Dublin Core element "%s" is mapped to non-existent field "%s".' % (element, elementMapping.field))
    return errors

def _slug(field):
    if isinstance(field, dict):
        return field.get('slug')
    return getattr(field, 'slug', None)


def defaultIdentifierPrefix(siteUrl):
    """'https://www.utsic.utoronto.ca' -> 'utsic-utoronto-ca:'"""
    if not siteUrl:
        return ''
    domain = urlsplit(siteUrl).hostname
    if not domain:
        return 'site:'
    if domain.startswith('www.'):
        domain = domain[len('www.'):]
    prefix = re.sub(r'[^a-zA-Z0-9\-]', '', domain.replace('.', '-')).strip('-')
    return prefix + ':'
