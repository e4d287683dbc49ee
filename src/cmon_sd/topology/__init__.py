"""
Cluster topology and its mapping to Prometheus scrape targets.
"""

from cmon_sd.topology.models import Cluster, Host, TargetGroup
from cmon_sd.topology.targets import (
    EXCLUDED_NODETYPES,
    EXPORTER_PORTS,
    UNIVERSAL_EXPORTER_PORTS,
    build_labels,
    host_targets,
    map_topology,
)

__all__ = [
    "Cluster",
    "Host",
    "TargetGroup",
    "EXCLUDED_NODETYPES",
    "EXPORTER_PORTS",
    "UNIVERSAL_EXPORTER_PORTS",
    "build_labels",
    "host_targets",
    "map_topology",
]
