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

import os
import stat
import threading

import pytest

from nfs_exporter.collector import CommandError


class FakeRunner(object):
    '''
    stands in for CommandRunner, answers per nfs address and records every call
    '''

    def __init__(self, outputs=None, default=""):
        self.outputs = outputs or {}
        self.default = default
        self.calls = []
        self._lock = threading.Lock()

    def __call__(self, args):
        with self._lock:
            self.calls.append(list(args))
        address = args[-1]
        out = self.outputs.get(address, self.default)
        if isinstance(out, Exception):
            raise out
        if callable(out):
            return out()
        return out


@pytest.fixture
def fake_runner():
    return FakeRunner


@pytest.fixture
def command_error():
    return lambda address: CommandError(["showmount", "-e", address], "exit status 1", 1, "clnt_create: RPC: timed out")


SHOWMOUNT_STUB = """#!/bin/sh
if [ "$1" != "-e" ]; then
    echo "usage: showmount -e host" >&2
    exit 2
fi
case "$2" in
    10.0.0.1)
        echo "Export list for 10.0.0.1:"
        echo "/data   10.0.0.0/24"
        echo "/home   *"
        ;;
    10.0.0.2)
        echo "clnt_create: RPC: Program not registered" >&2
        exit 1
        ;;
esac
"""


@pytest.fixture
def showmount_stub(tmp_path):
    '''
    path to a fake showmount executable
    '''
    path = tmp_path / "showmount"
    path.write_text(SHOWMOUNT_STUB)
    path.chmod(path.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return os.fspath(path)
