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

from time import strftime, gmtime
from datetime import timezone
from socket import gethostname
from xml.sax.saxutils import escape as xmlEscape
import re

HOSTNAME = gethostname()

CONTENT_TYPE = 'text/xml; charset=utf-8'
ZULU_FORMAT = '%Y-%m-%dT%H:%M:%SZ'


class OaiException(Exception):
    def __init__(self, statusCode, additionalMessage=""):
        Exception.__init__(self, additionalMessage)
        self.additionalMessage = additionalMessage
        self.statusCode = statusCode

class OaiBadArgumentException(OaiException):
    def __init__(self, additionalMessage):
        OaiException.__init__(self, 'badArgument', additionalMessage)


def zuluTime(seconds=None):
    return strftime(ZULU_FORMAT, gmtime(seconds))

def datetime2zulutime(aDatetime):
    if aDatetime.tzinfo is not None:
        aDatetime = aDatetime.astimezone(timezone.utc)
    return aDatetime.strftime(ZULU_FORMAT)

def xmlAttributeEscape(value):
    return xmlEscape(value, {'"': '&quot;'})

def oaiHeader(responseDate):
    yield OAIHEADER
    yield RESPONSE_DATE % responseDate

def oaiFooter():
    yield OAIFOOTER

def oaiRequestArgs(arguments, requestUrl):
    """Echoes the verb first, then every other argument with a non-empty value."""
    names = sorted(k for k, v in arguments.items() if k != 'verb' and v and v[0])
    if arguments.get('verb'):
        names.insert(0, 'verb')
    args = ''.join(' %s="%s"' % (xmlAttributeEscape(k), xmlAttributeEscape(arguments[k][0])) for k in names)
    url = xmlEscape(requestUrl)
    yield REQUEST % locals()


def checkNoRepeatedArguments(arguments):
    for k, v in arguments.items():
        if len(v) > 1:
            raise OaiBadArgumentException('Argument "%s" may not be repeated.' % k)

def checkNoMoreArguments(arguments):
    if arguments:
        raise OaiBadArgumentException('Illegal argument: "%s".' % next(iter(arguments)))

def checkArgument(arguments, name, validatedArguments):
    try:
        value = arguments.pop(name)
    except KeyError:
        return False
    validatedArguments[name] = value[0] if value else ''
    return True

def checkRequiredArguments(arguments, names, validatedArguments):
    missing = []
    for name in names:
        if not checkArgument(arguments, name, validatedArguments) or not validatedArguments[name]:
            missing.append('"%s"' % name)
    if missing:
        raise OaiBadArgumentException('Missing argument(s) ' + " and ".join(missing) + ".")

def checkMetadataPrefix(metadataPrefix):
    if metadataPrefix not in METADATA_PREFIXES:
        raise OaiException('cannotDisseminateFormat', 'Unsupported metadata format "%s".' % metadataPrefix)


class OaiDateException(Exception):
    pass

class OaiDate(object):
    """UTCdatetime argument value, either day (YYYY-MM-DD) or seconds
    (YYYY-MM-DDThh:mm:ssZ) granularity. Validity is lexical only: a value
    like 2023-13-45 is accepted and passed on unchanged."""

    def __init__(self, value):
        if _SHORT_DATE.match(value):
            self._short = True
        elif _LONG_DATE.match(value):
            self._short = False
        else:
            raise OaiDateException(value)
        self._value = value

    def isShort(self):
        return self._short

    def day(self):
        return self._value[:10]

    def __str__(self):
        return self._value

_SHORT_DATE = re.compile(r'\d{4}-\d{2}-\d{2}\Z')
_LONG_DATE = re.compile(r'\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}Z\Z')


OAI_DC_PREFIX = 'oai_dc'
OAI_DC_SCHEMA = 'http://www.openarchives.org/OAI/2.0/oai_dc.xsd'
OAI_DC_NAMESPACE = 'http://www.openarchives.org/OAI/2.0/oai_dc/'
DC_NAMESPACE = 'http://purl.org/dc/elements/1.1/'

METADATA_FORMATS = [(OAI_DC_PREFIX, OAI_DC_SCHEMA, OAI_DC_NAMESPACE)]
METADATA_PREFIXES = set(prefix for prefix, schema, namespace in METADATA_FORMATS)

OAIHEADER = '<?xml version="1.0" encoding="UTF-8"?>\n' +\
    '<OAI-PMH xmlns="http://www.openarchives.org/OAI/2.0/" ' +\
    'xmlns:xsi="http://www.w3.org/2001/XMLSchema-instance" ' +\
    'xsi:schemaLocation="http://www.openarchives.org/OAI/2.0/ http://www.openarchives.org/OAI/2.0/OAI-PMH.xsd">'

RESPONSE_DATE = """<responseDate>%s</responseDate>"""

REQUEST = """<request%(args)s>%(url)s</request>"""

OAIFOOTER = """</OAI-PMH>"""

OAI_DC_HEADER = '<oai_dc:dc ' +\
    'xmlns:oai_dc="%s" ' % OAI_DC_NAMESPACE +\
    'xmlns:dc="%s" ' % DC_NAMESPACE +\
    'xmlns:xsi="http://www.w3.org/2001/XMLSchema-instance" ' +\
    'xsi:schemaLocation="%s %s">' % (OAI_DC_NAMESPACE, OAI_DC_SCHEMA)

OAI_DC_FOOTER = '</oai_dc:dc>'
