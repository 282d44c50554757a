"""Pulumi components for the Docker VPS deployment."""

from .dns import CloudflareRecords
from .docker_host import DockerHost, cloud_init_script, firewall_rules

__all__ = ["CloudflareRecords", "DockerHost", "cloud_init_script", "firewall_rules"]
