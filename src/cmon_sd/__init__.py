"""Prometheus HTTP service discovery for ClusterControl-managed clusters."""

__version__ = "0.1.0"
