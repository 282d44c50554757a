"""Pulumi program deploying the site to a Hetzner VPS behind Cloudflare."""

import sys
from pathlib import Path

# Add the project root to the Python path
sys.path.insert(0, str(Path(__file__).parent.parent))

import pulumi
import pulumi_cloudflare as cloudflare
import pulumi_hcloud as hcloud

from infrastructure.config import Config
from infrastructure.pulumi_components import CloudflareRecords, DockerHost

settings = pulumi.Config()
config_path = settings.get("configPath") or str(Path(__file__).parent.parent / "sites.yaml")
vps = Config.from_yaml(config_path).vps
if vps is None:
  raise ValueError(f"No vps section in {config_path}")

# Hetzner image with docker preinstalled
os_image = hcloud.get_image(
  name=vps.os_image,
  with_architecture=vps.architecture,
  most_recent=True,
)
pulumi.log.info(f"Using {vps.os_image} image {os_image.id} ({vps.architecture})")

host = DockerHost(vps.name, vps, image_id=str(os_image.id))

zone = cloudflare.get_zone(filter=cloudflare.GetZoneFilterArgs(name=vps.domain))

CloudflareRecords(
  f"{vps.name}-dns",
  domain=vps.domain,
  zone_id=zone.id,
  address=host.ipv4_address,
  proxied=vps.proxied,
  depends_on=[host.server],
)

pulumi.export("website", f"https://{vps.domain}")
pulumi.export("ipv4_address", host.ipv4_address)
