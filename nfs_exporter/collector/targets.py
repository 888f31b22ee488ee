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
probe target definition and parsing of the nfs uri list
"""

import logging
from typing import NamedTuple, Optional, Tuple


class Target(NamedTuple):
    '''
    one nfs server address and the mount path it is expected to export
    '''
    address: str
    mount_path: str


def parse_target(uri: str) -> Optional[Target]:
    # mount path may contain colons, only the first one separates the address
    parts = uri.split(":", 1)
    if len(parts) != 2:
        logging.warning("Invalid NFS URI format: %s", uri)
        return None
    address, mount_path = parts
    return Target(address, mount_path)


def parse_targets(uris: str) -> Tuple[Target, ...]:
    '''
    parse comma separated `address:mount_path` entries, malformed entries are skipped
    '''
    targets = []
    for uri in uris.split(","):
        target = parse_target(uri)
        if target is not None:
            targets.append(target)
    return tuple(targets)
