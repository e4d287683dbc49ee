"""
Topology models for target generation.

Clusters and hosts are rebuilt from every controller response; target groups
are the Prometheus ``http_sd_configs`` payload derived from them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


def _as_int(value: Any) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return 0


@dataclass
class Host:
    """A node belonging to a managed cluster."""

    ip: str
    nodetype: str
    role: str = ""  # only meaningful for mongo nodes
    hostname: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Host:
        """Build a host from a cmon host object, tolerating missing fields."""
        return cls(
            ip=str(data.get("ip") or ""),
            nodetype=str(data.get("nodetype") or ""),
            role=str(data.get("role") or ""),
            hostname=str(data.get("hostname") or ""),
        )


@dataclass
class Cluster:
    """A managed database cluster and its hosts."""

    cluster_id: int
    cluster_name: str
    cluster_type: str
    hosts: list[Host] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Cluster:
        """Build a cluster from a cmon cluster object, tolerating missing fields."""
        hosts = data.get("hosts")
        if not isinstance(hosts, list):
            hosts = []
        return cls(
            cluster_id=_as_int(data.get("cluster_id")),
            cluster_name=str(data.get("cluster_name") or ""),
            cluster_type=str(data.get("cluster_type") or ""),
            hosts=[Host.from_dict(h) for h in hosts if isinstance(h, dict)],
        )


@dataclass
class TargetGroup:
    """One ``http_sd_configs`` entry: scrape targets sharing a label set."""

    targets: list[str] = field(default_factory=list)
    labels: dict[str, str] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary, omitting empty fields."""
        result: dict[str, Any] = {}
        if self.targets:
            result["targets"] = list(self.targets)
        if self.labels:
            result["labels"] = dict(self.labels)
        return result
