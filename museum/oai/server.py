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

from fastapi import FastAPI, Request
from fastapi.responses import Response
from fastapi.concurrency import run_in_threadpool
import uvicorn

from .__version__ import VERSION
from .catalogue import MemoryCatalogue
from .config import readConfig
from .kindconfiguration import KindConfiguration
from .oaipmh import OaiPmh
from .oaiutils import CONTENT_TYPE


def createApp(oaiPmh, path='/oai-pmh'):
    app = FastAPI(title="Museum Oai", version=VERSION)

    @app.api_route(path, methods=['GET', 'POST'])
    async def oaiPmhRequest(request: Request):
        arguments = {}
        for key, value in request.query_params.multi_items():
            arguments.setdefault(key, []).append(value)
        Body = await request.body() if request.method == 'POST' else None
        headers = {'Host': request.headers['host']} if 'host' in request.headers else {}
        body = await run_in_threadpool(_respond, oaiPmh,
            Method=request.method,
            arguments=arguments,
            Body=Body,
            Headers=headers,
            path=request.url.path,
            port=request.url.port,
        )
        return Response(content=body, media_type=CONTENT_TYPE)

    return app


def _respond(oaiPmh, **kwargs):
    return ''.join(oaiPmh.handleRequest(**kwargs))


def main():
    config = readConfig()
    kindConfiguration = KindConfiguration(config.mappings, siteUrl=config.siteUrl) if config.mappings else None
    catalogue = MemoryCatalogue.fromFile(config.catalogue, kindConfiguration=kindConfiguration)
    oaiPmh = OaiPmh(
        repositoryName=config.repositoryName,
        adminEmail=config.adminEmail,
        catalogue=catalogue,
        externalUrl=config.baseUrl,
    )
    uvicorn.run(createApp(oaiPmh, path=config.path), host=config.host, port=config.port)


if __name__ == '__main__':
    main()
