#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# Copyright 2021 4Paradigm
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#   http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""
main entry of nfs prometheus exporter
"""

import html
import logging
import socket
import sys
from typing import Optional, Sequence

from nfs_exporter import __version__
from nfs_exporter.collector import (ConfigStore, CommandRunner, NfsCollector)
from prometheus_client import REGISTRY, CollectorRegistry
from prometheus_client.twisted import MetricsResource
from twisted.internet import reactor
from twisted.internet.error import CannotListenError
from twisted.web.resource import Resource
from twisted.web.server import Site


class LandingPage(Resource):
    '''
    minimal html index linking to the metrics path
    '''
    isLeaf = True

    def __init__(self, telemetry_path: str):
        super().__init__()
        title = f"NFS Exporter v{__version__}"
        self._body = (f"<html>\n"
                      f"<head><title>{title}</title></head>\n"
                      f"<body>\n"
                      f"<h1>{title}</h1>\n"
                      f"<p><a href='{html.escape(telemetry_path, quote=True)}'>Metrics</a></p>\n"
                      f"</body>\n"
                      f"</html>\n").encode()

    def render_GET(self, request):
        request.setHeader(b"content-type", b"text/html; charset=utf-8")
        return self._body


class RootResource(Resource):
    '''
    serves the landing page for every path without a registered child
    '''

    def __init__(self, landing_page: LandingPage):
        super().__init__()
        self._landing_page = landing_page

    def getChild(self, path, request):
        return self._landing_page


def build_site(telemetry_path: str, registry: CollectorRegistry = REGISTRY) -> Site:
    segments = [seg.encode() for seg in telemetry_path.strip("/").split("/") if seg]
    if not segments:
        raise ValueError(f"Invalid telemetry path: {telemetry_path}")

    root = RootResource(LandingPage(telemetry_path))
    # child path must be bytes, nested paths need a resource per segment
    parent = root
    for seg in segments[:-1]:
        child = Resource()
        parent.putChild(seg, child)
        parent = child
    parent.putChild(segments[-1], MetricsResource(registry=registry))
    return Site(root)


def fatal(msg: str, *args):
    logging.critical(msg, *args)
    sys.exit(1)


def main(argv: Optional[Sequence[str]] = None, registry: CollectorRegistry = REGISTRY):
    cfg_store = ConfigStore(argv)

    try:
        log_level = cfg_store.get_log_level()
        host, port = cfg_store.get_listen_host_port()
    except ValueError as e:
        sys.exit(f"nfs_exporter: {e}")
    logging.basicConfig(level=log_level)

    logging.info("Starting nfs_exporter %s", __version__)
    logging.info("NFS URI: %s", cfg_store.nfs_uri)

    try:
        hostname = socket.gethostname()
    except OSError as e:
        fatal("While trying to get Hostname error happened: %s", e)

    collector = NfsCollector(cfg_store.get_targets(),
                             cfg_store.executable_path,
                             runner=CommandRunner(cfg_store.probe_timeout),
                             hostname=hostname)
    try:
        registry.register(collector)
    except ValueError as e:
        fatal("Failed to register collector: %s", e)

    try:
        factory = build_site(cfg_store.telemetry_path, registry)
    except ValueError as e:
        fatal("Failed to serve metrics: %s", e)

    try:
        reactor.listenTCP(port, factory, interface=host)
    except CannotListenError as e:
        fatal("Failed to listen on %s: %s", cfg_store.listen_address, e)

    logging.info("Listening on %s", cfg_store.listen_address)
    reactor.run()


if __name__ == "__main__":
    main()
