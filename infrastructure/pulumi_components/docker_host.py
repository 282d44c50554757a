"""Hetzner VM running the site as a Docker container."""

from pathlib import Path

import pulumi
import pulumi_docker as docker
import pulumi_hcloud as hcloud
import pulumi_tls as tls

from ..config import VpsConfig

ANYWHERE = ["0.0.0.0/0", "::/0"]

TAILSCALE_REPO = "https://pkgs.tailscale.com/stable/ubuntu"


def firewall_rules(ports: list[int]) -> list[hcloud.FirewallRuleArgs]:
  """Inbound TCP rules opening each port to every IPv4 and IPv6 address."""
  return [
    hcloud.FirewallRuleArgs(
      direction="in",
      protocol="tcp",
      port=str(port),
      source_ips=ANYWHERE,
    )
    for port in ports
  ]


def cloud_init_script(install_tailscale: bool = True) -> str:
  """User data run on first boot of the VM."""
  lines = ["#!/bin/bash"]
  if install_tailscale:
    lines += [
      f"curl -fsSL {TAILSCALE_REPO}/noble.noarmor.gpg"
      " | tee /usr/share/keyrings/tailscale-archive-keyring.gpg >/dev/null",
      f"curl -fsSL {TAILSCALE_REPO}/noble.tailscale-keyring.list"
      " | tee /etc/apt/sources.list.d/tailscale.list",
      "apt-get update",
      "apt-get install -y ca-certificates curl tailscale",
    ]
  return "\n".join(lines)


def _write_private_key(path: Path, key: str) -> str:
  # The docker provider shells out to ssh, which needs the key on disk
  path.parent.mkdir(parents=True, exist_ok=True)
  path.touch(mode=0o600, exist_ok=True)
  path.chmod(0o600)
  path.write_text(key)
  return str(path.resolve())


class DockerHost(pulumi.ComponentResource):
  """
  Hetzner server with Docker, reached over SSH by the docker provider.
  Builds the site image on the server and runs it as a container.
  """

  def __init__(
    self,
    name: str,
    config: VpsConfig,
    *,
    image_id: pulumi.Input[str],
    opts: pulumi.ResourceOptions | None = None,
  ):
    super().__init__("portfolio:vps:DockerHost", name, None, opts)

    # SSH key generated locally and registered with Hetzner
    self.ssh_key = tls.PrivateKey(
      f"{name}-private-key",
      algorithm="ED25519",
      opts=pulumi.ResourceOptions(parent=self),
    )

    hetzner_key = hcloud.SshKey(
      f"{name}-public-key",
      public_key=self.ssh_key.public_key_openssh,
      opts=pulumi.ResourceOptions(parent=self),
    )

    self.firewall = hcloud.Firewall(
      f"{name}-firewall",
      name=f"{config.name}Firewall",
      rules=firewall_rules(config.open_ports),
      opts=pulumi.ResourceOptions(parent=self),
    )

    self.server = hcloud.Server(
      f"{name}-server",
      name=config.name,
      image=image_id,
      server_type=config.server_type,
      location=config.location,
      user_data=cloud_init_script(config.install_tailscale),
      public_nets=[
        hcloud.ServerPublicNetArgs(ipv4_enabled=True, ipv6_enabled=True),
      ],
      ssh_keys=[hetzner_key.id],
      firewall_ids=[self.firewall.id.apply(int)],
      opts=pulumi.ResourceOptions(parent=self),
    )

    self.ssh_key_path = self.ssh_key.private_key_openssh.apply(
      lambda key: _write_private_key(config.ssh_key_path, key)
    )

    self.provider = docker.Provider(
      f"{name}-docker",
      host=pulumi.Output.concat("ssh://root@", self.server.ipv4_address),
      ssh_opts=self.ssh_key_path.apply(
        lambda path: ["-i", path, "-o", "StrictHostKeyChecking=no", "-p", "22"]
      ),
      opts=pulumi.ResourceOptions(parent=self),
    )

    self.network = docker.Network(
      f"{name}-network",
      name=config.network_name,
      opts=pulumi.ResourceOptions(
        parent=self, provider=self.provider, depends_on=[self.server]
      ),
    )

    # Built on the server itself, nothing is pushed to a registry
    self.image = docker.Image(
      f"{name}-image",
      image_name=config.image_name,
      build=docker.DockerBuildArgs(
        context=str(config.build_context),
        dockerfile=str(config.dockerfile),
        platform=config.platform,
      ),
      skip_push=True,
      opts=pulumi.ResourceOptions(
        parent=self, provider=self.provider, depends_on=[self.server]
      ),
    )

    self.container = docker.Container(
      f"{name}-container",
      name=config.container_name,
      image=self.image.image_name,
      ports=[
        docker.ContainerPortArgs(internal=port, external=port)
        for port in config.container_ports
      ],
      networks_advanced=[
        docker.ContainerNetworksAdvancedArgs(name=self.network.id),
      ],
      restart="always",
      opts=pulumi.ResourceOptions(
        parent=self, provider=self.provider, depends_on=[self.image]
      ),
    )

    self.ipv4_address = self.server.ipv4_address
    self.register_outputs({
      "ipv4_address": self.ipv4_address,
      "ssh_key_path": self.ssh_key_path,
    })
