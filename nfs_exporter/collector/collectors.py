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
Collector definations
"""

from abc import ABC, abstractmethod
import logging
import threading
from typing import Callable, Dict, Iterable, Iterator, List, Optional, Sequence, Tuple

from prometheus_client.core import Metric

from nfs_exporter.collector.metrics import new_up_family
from nfs_exporter.collector.runner import CommandError, CommandRunner
from nfs_exporter.collector.targets import Target


class Collector(ABC):
    '''
    ABC for custom prometheus collectors, registered on a CollectorRegistry
    '''

    @abstractmethod
    def describe(self) -> List[Metric]:
        '''
        metric families this collector exposes, without sample values
        '''
        pass

    @abstractmethod
    def collect(self) -> Iterator[Metric]:
        '''
        produce metric families with current sample values
        '''
        pass


class NfsCollector(Collector):
    '''
    probes every nfs target through `showmount -e <address>` on each scrape
    and reports whether its mount path is exported
    '''
    _targets: Sequence[Target]
    _executable_path: str
    _runner: Callable[[Sequence[str]], str]
    hostname: str

    def __init__(self,
                 targets: Iterable[Target],
                 executable_path: str,
                 runner: Optional[Callable[[Sequence[str]], str]] = None,
                 hostname: str = ""):
        self._targets = tuple(targets)
        self._executable_path = executable_path
        self._runner = runner if runner is not None else CommandRunner()
        self.hostname = hostname

    def describe(self) -> List[Metric]:
        return [new_up_family()]

    def collect(self) -> Iterator[Metric]:
        values: Dict[Tuple[str, str], float] = {}
        lock = threading.Lock()

        workers = [
            threading.Thread(target=self._probe_and_publish, args=(target, values, lock), daemon=True)
            for target in self._targets
        ]
        for worker in workers:
            worker.start()
        for worker in workers:
            worker.join()

        up = new_up_family()
        for labels, value in values.items():
            up.add_metric(list(labels), value)
        yield up

    def probe(self, target: Target) -> bool:
        try:
            output = self._runner([self._executable_path, "-e", target.address])
        except CommandError as e:
            logging.error("Exec Command %s %s failed: %s", self._executable_path, target.address, e)
            return False

        for line in output.strip().split("\n"):
            fields = line.split()
            if len(fields) > 0 and fields[0] == target.mount_path:
                logging.info("Mount Path is matching NFS server: %s %s", target.mount_path, target.address)
                return True
        return False

    def _probe_and_publish(self, target: Target, values: Dict[Tuple[str, str], float], lock: threading.Lock):
        found = False
        try:
            found = self.probe(target)
        finally:
            # publish even when the probe raised, duplicate targets overwrite the same series
            with lock:
                values[(target.mount_path, target.address)] = 1.0 if found else 0.0
