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

from os import environ

from dotenv import load_dotenv


def getEnv(key, required=True, default=None, env=None):
    value = (environ if env is None else env).get(key, default)
    if required and not value:
        raise ValueError("Environment variable '%s' is missing." % key)
    return value


class ServerConfig(object):
    def __init__(self, env=None):
        self.repositoryName = getEnv('MUSEUM_OAI_REPOSITORY_NAME', required=False, default='Museum Collection', env=env)
        self.adminEmail = getEnv('MUSEUM_OAI_ADMIN_EMAIL', env=env)
        self.baseUrl = getEnv('MUSEUM_OAI_BASE_URL', required=False, env=env)
        self.catalogue = getEnv('MUSEUM_OAI_CATALOGUE', env=env)
        self.mappings = getEnv('MUSEUM_OAI_MAPPINGS', required=False, env=env)
        self.siteUrl = getEnv('MUSEUM_OAI_SITE_URL', required=False, env=env)
        self.host = getEnv('MUSEUM_OAI_HOST', required=False, default='0.0.0.0', env=env)
        self.port = int(getEnv('MUSEUM_OAI_PORT', required=False, default='8000', env=env))
        self.path = getEnv('MUSEUM_OAI_PATH', required=False, default='/oai-pmh', env=env)


def readConfig(dotenvPath=None):
    load_dotenv(dotenvPath)
    return ServerConfig()
