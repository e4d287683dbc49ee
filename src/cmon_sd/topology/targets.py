"""
Map cluster topology to Prometheus scrape targets.

Every scrapable host exposes the node and process exporters; database and
proxy nodes additionally expose the exporter for their engine. Ports follow
the exporter conventions dashboards and scrape configs already rely on.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from cmon_sd.topology.models import Cluster, Host, TargetGroup

NODE_EXPORTER_PORT = 9100
PROCESS_EXPORTER_PORT = 9011

UNIVERSAL_EXPORTER_PORTS: tuple[int, ...] = (NODE_EXPORTER_PORT, PROCESS_EXPORTER_PORT)

# Node types that are part of the monitoring stack itself
EXCLUDED_NODETYPES: frozenset[str] = frozenset({"controller", "prometheus", "keepalived"})

# (nodetype, role) -> exporter port; a role of None matches any role
EXPORTER_PORTS: dict[tuple[str, str | None], int] = {
    ("mysql", None): 9104,
    ("galera", None): 9104,
    ("haproxy", None): 9600,
    ("mongo", "shardsvr"): 9216,
    ("mongo", "mongos"): 9215,
    ("mongo", "mongocfg"): 9214,
    ("mssql", None): 9399,
    ("postgres", None): 9187,
    ("redis", None): 9121,
    ("proxysql", None): 42004,
    ("pgbouncer", None): 9127,
}


def _endpoint(ip: str, port: int) -> str:
    return f"{ip}:{port}"


def exporter_ports(host: Host) -> list[int]:
    """Return the exporter ports a host exposes, empty for excluded node types."""
    if host.nodetype in EXCLUDED_NODETYPES:
        return []

    ports = list(UNIVERSAL_EXPORTER_PORTS)
    for key in ((host.nodetype, None), (host.nodetype, host.role)):
        port = EXPORTER_PORTS.get(key)
        if port is not None:
            ports.append(port)
    return ports


def host_targets(host: Host) -> list[str]:
    """Return ``ip:port`` scrape targets for one host, in discovery order."""
    return [_endpoint(host.ip, port) for port in exporter_ports(host)]


def build_labels(cluster: Cluster, controller_id: str) -> dict[str, str]:
    """Labels attached to every target of a cluster."""
    cluster_id = str(cluster.cluster_id)
    return {
        "ClusterID": cluster_id,
        "cid": cluster_id,  # kept for existing dashboards
        "ClusterName": cluster.cluster_name,
        "ClusterType": cluster.cluster_type,
        "ControllerId": controller_id,
    }


def cluster_targets(hosts: Iterable[Host]) -> list[str]:
    """Collect targets for all hosts, deduplicated and sorted."""
    targets: set[str] = set()
    for host in hosts:
        targets.update(host_targets(host))
    return sorted(targets)


def map_topology(clusters: Sequence[Cluster], controller_id: str) -> list[TargetGroup]:
    """
    Build one target group per cluster, in cluster order.

    Unknown node types and mongo roles only contribute the universal
    exporters; nothing in the topology makes this fail.
    """
    return [
        TargetGroup(
            targets=cluster_targets(cluster.hosts),
            labels=build_labels(cluster, controller_id),
        )
        for cluster in clusters
    ]
