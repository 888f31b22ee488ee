"""
module collector
"""
from nfs_exporter.collector.metrics import (
    NAMESPACE,
    UP_NAME,
    UP_HELP,
    up_labels,
    new_up_family,
)
from nfs_exporter.collector.targets import (
    Target,
    parse_target,
    parse_targets,
)
from nfs_exporter.collector.runner import (
    CommandError,
    CommandRunner,
)
from nfs_exporter.collector.configstore import (
    ConfigStore
)

from nfs_exporter.collector.collectors import (
    NfsCollector,
    Collector,
)

__all__ = [
    "NAMESPACE",
    "UP_NAME",
    "UP_HELP",
    "up_labels",
    "new_up_family",
    "Target",
    "parse_target",
    "parse_targets",
    "CommandError",
    "CommandRunner",
    "ConfigStore",
    "NfsCollector",
    "Collector",
]
