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
metric definatitons of nfs exporter
"""

from prometheus_client.core import GaugeMetricFamily

NAMESPACE = "nfs"

# labels
MOUNT_PATH = "mount_path"
NFS_ADDRESS = "nfs_address"

up_labels = [MOUNT_PATH, NFS_ADDRESS]

UP_NAME = f"{NAMESPACE}_up"
UP_HELP = "Was the last query of NFS successful."


def new_up_family() -> GaugeMetricFamily:
    return GaugeMetricFamily(UP_NAME, UP_HELP, labels=up_labels)
