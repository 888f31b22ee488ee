# Copyright 2022 4Paradigm
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
exporter configuration parse and management
"""

import argparse
import logging
from typing import Optional, Sequence, Tuple

from nfs_exporter import __version__
from nfs_exporter.collector.targets import Target, parse_targets

DEFAULT_EXECUTABLE_PATH = "/usr/sbin/showmount"
DEFAULT_NFS_URI = "192.168.2.22:/mnt,192.168.2.22:/opt"


class ConfigStore(object):
    '''
    class to init a ArgumentParser and store all exporter configurations
    '''

    _args: argparse.Namespace
    log_level: str
    listen_address: str
    telemetry_path: str
    executable_path: str
    nfs_uri: str
    probe_timeout: Optional[float]

    def __init__(self, argv: Optional[Sequence[str]] = None):
        parser = argparse.ArgumentParser(description="NFS exporter")
        parser.add_argument("--version", action="version", version=f"nfs_exporter {__version__}")
        parser.add_argument("--log.level", type=str, default="INFO", help="config log level")
        parser.add_argument("--web.listen-address",
                            type=str,
                            default=":9689",
                            help="Address on which to expose metrics and web interface")
        parser.add_argument("--web.telemetry-path",
                            type=str,
                            default="/metrics",
                            help="Path under which to expose metrics")
        parser.add_argument("--nfs.executable-path",
                            type=str,
                            default=DEFAULT_EXECUTABLE_PATH,
                            help="Path to nfs executable")
        parser.add_argument("--nfs.uri",
                            type=str,
                            default=DEFAULT_NFS_URI,
                            help="NFS URIs, comma separated address:mount_path entries")
        parser.add_argument("--nfs.timeout",
                            type=float,
                            default=0.0,
                            help="timeout in seconds for each nfs executable call, 0 means no timeout")
        self._args = parser.parse_args(argv)
        self._store_cfgs()

    def _get_cfg(self, key: str):
        '''
        key fetching that handles key whose value may contains literal dot('.')
        '''
        val = self._args.__dict__.get(key)
        if val is None:
            raise KeyError(f"value for {key} not exist")
        return val

    def _store_cfgs(self):
        self.log_level = self._get_cfg("log.level")
        self.listen_address = self._get_cfg("web.listen_address")
        self.telemetry_path = self._get_cfg("web.telemetry_path")
        self.executable_path = self._get_cfg("nfs.executable_path")
        self.nfs_uri = self._get_cfg("nfs.uri")
        timeout = self._get_cfg("nfs.timeout")
        self.probe_timeout = timeout if timeout > 0 else None

    def get_log_level(self) -> int:
        numeric_level = getattr(logging, self.log_level.upper(), None)
        if not isinstance(numeric_level, int):
            raise ValueError(f"Invalid log level: {self.log_level}")
        return numeric_level

    def get_listen_host_port(self) -> Tuple[str, int]:
        '''
        split `[host]:port`, an empty host listens on all interfaces
        '''
        host, sep, port = self.listen_address.rpartition(":")
        if not sep:
            host, port = "", self.listen_address
        try:
            return host.strip("[]"), int(port)
        except ValueError:
            raise ValueError(f"Invalid listen address: {self.listen_address}") from None

    def get_targets(self) -> Tuple[Target, ...]:
        return parse_targets(self.nfs_uri)
