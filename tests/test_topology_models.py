"""Tests for topology models: parsing controller objects and serialization."""

from __future__ import annotations

from cmon_sd.topology.models import Cluster, Host, TargetGroup


class TestHost:
    def test_from_dict(self):
        host = Host.from_dict(
            {
                "hostname": "db1.example.com",
                "ip": "10.0.0.1",
                "nodetype": "mongo",
                "role": "mongos",
                "port": 27017,
            }
        )
        assert host == Host(ip="10.0.0.1", nodetype="mongo", role="mongos", hostname="db1.example.com")

    def test_from_dict_missing_fields(self):
        host = Host.from_dict({"ip": "10.0.0.1"})
        assert host.nodetype == ""
        assert host.role == ""
        assert host.hostname == ""

    def test_from_dict_null_fields(self):
        host = Host.from_dict({"ip": None, "nodetype": None, "role": None})
        assert host == Host(ip="", nodetype="", role="")


class TestCluster:
    def test_from_dict(self):
        cluster = Cluster.from_dict(
            {
                "cluster_id": 1,
                "cluster_name": "cluster1",
                "cluster_type": "POSTGRESQL_SINGLE",
                "state": "STARTED",
                "hosts": [
                    {"ip": "10.0.0.1", "nodetype": "controller"},
                    {"ip": "10.0.0.2", "nodetype": "postgres"},
                ],
            }
        )
        assert cluster.cluster_id == 1
        assert cluster.cluster_name == "cluster1"
        assert cluster.cluster_type == "POSTGRESQL_SINGLE"
        assert [h.nodetype for h in cluster.hosts] == ["controller", "postgres"]

    def test_from_dict_without_hosts(self):
        cluster = Cluster.from_dict({"cluster_id": 2, "cluster_name": "c2", "cluster_type": "redis"})
        assert cluster.hosts == []

    def test_from_dict_skips_non_object_hosts(self):
        cluster = Cluster.from_dict({"cluster_id": 2, "hosts": ["bogus", {"ip": "10.0.0.1"}]})
        assert [h.ip for h in cluster.hosts] == ["10.0.0.1"]

    def test_from_dict_hosts_not_a_list(self):
        for hosts in (5, "10.0.0.1", {"ip": "10.0.0.1"}, True):
            cluster = Cluster.from_dict({"cluster_id": 1, "cluster_name": "c1", "hosts": hosts})
            assert cluster.hosts == []
            assert cluster.cluster_name == "c1"

    def test_from_dict_bad_cluster_id(self):
        assert Cluster.from_dict({"cluster_id": "not-a-number"}).cluster_id == 0
        assert Cluster.from_dict({"cluster_id": "12"}).cluster_id == 12


class TestTargetGroup:
    def test_to_dict_full(self):
        group = TargetGroup(targets=["10.0.0.1:9100"], labels={"ClusterID": "1"})
        assert group.to_dict() == {"targets": ["10.0.0.1:9100"], "labels": {"ClusterID": "1"}}

    def test_to_dict_omits_empty_targets(self):
        group = TargetGroup(labels={"ClusterID": "1"})
        assert group.to_dict() == {"labels": {"ClusterID": "1"}}

    def test_to_dict_empty(self):
        assert TargetGroup().to_dict() == {}
