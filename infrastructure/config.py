"""Configuration loader for the portfolio sites and the VPS deployment."""

import os
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any

import yaml
from aws_cdk import RemovalPolicy

# ACM certificates used by CloudFront must live in us-east-1
CERTIFICATE_REGION = "us-east-1"

FRAMEWORKS = ("next", "astro")

REMOVAL_POLICIES = {
  "retain": RemovalPolicy.RETAIN,
  "destroy": RemovalPolicy.DESTROY,
  "snapshot": RemovalPolicy.SNAPSHOT,
}

DEFAULT_NAVIGATION = [
  {"href": "/", "title": "Home"},
  {"href": "/blog", "title": "Blog"},
  {"href": "/tags", "title": "Tags"},
]


@dataclass
class SiteMetadata:
  """Site metadata shared with the static site generator."""

  title: str
  author: str = ""
  header_title: str = ""
  description: str = ""
  language: str = "en-us"
  locale: str = "en-US"
  site_url: str = ""
  site_repo: str = ""
  social_banner: str = ""
  email: str = ""
  github: str = ""
  twitter: str = ""
  linkedin: str = ""
  theme: str = "system"  # Options: system, light, dark
  items_per_page: int = 5
  navigation: list[dict[str, str]] = field(
    default_factory=lambda: [dict(item) for item in DEFAULT_NAVIGATION]
  )

  def to_dict(self) -> dict[str, Any]:
    """Return the metadata with camelCase keys, as the site generator expects."""
    return {_camel_case(key): value for key, value in asdict(self).items()}


@dataclass
class SiteConfig:
  """Configuration for a single static site."""

  domain: str
  framework: str = "next"  # "next" (S3 website + cache headers) or "astro"
  content_path: Path | None = None
  acm_arn_path: str = "/portfolio/acmCertArn"
  region: str = "us-east-2"
  include_www: bool = True
  hosted_zone_id: str | None = None
  s3_referer: str | None = None
  removal_policy: RemovalPolicy = RemovalPolicy.RETAIN
  expiry_alarm_days: int = 45
  metadata: SiteMetadata | None = None

  @property
  def certificate_region(self) -> str:
    return CERTIFICATE_REGION

  @property
  def stack_suffix(self) -> str:
    return self.domain.replace(".", "-")

  def validate(self) -> None:
    """Raise ValueError when the site cannot be synthesized."""
    if not self.domain:
      raise ValueError("Site domain is required")
    if self.framework not in FRAMEWORKS:
      raise ValueError(
        f"Site {self.domain}: unknown framework '{self.framework}' "
        f"(expected one of {', '.join(FRAMEWORKS)})"
      )
    if not self.acm_arn_path.startswith("/"):
      raise ValueError(
        f"Site {self.domain}: acm_arn_path must start with '/', got '{self.acm_arn_path}'"
      )
    if self.framework == "next" and not self.s3_referer:
      raise ValueError(
        f"Site {self.domain}: s3_referer (or $S3_REFERER) is required for next sites"
      )


@dataclass
class VpsConfig:
  """Configuration for the Docker VPS deployment."""

  domain: str
  name: str = "appServer"
  server_type: str = "cax11"
  location: str = "hel1"
  os_image: str = "docker-ce"
  architecture: str = "arm"
  image_name: str = "cloud-resume/cloud-resume:latest"
  container_name: str = "cloud-resume"
  build_context: Path = Path(".")
  dockerfile: Path = Path("Dockerfile")
  platform: str = "linux/arm64"
  ssh_key_path: Path = Path("id_ed25519_hetzner")
  open_ports: list[int] = field(default_factory=lambda: [22, 80, 443])
  container_ports: list[int] = field(default_factory=lambda: [80, 443])
  network_name: str = "app_network_public"
  proxied: bool = True
  install_tailscale: bool = True


@dataclass
class Config:
  """Portfolio infrastructure configuration."""

  sites: list[SiteConfig] = field(default_factory=list)
  vps: VpsConfig | None = None

  def site(self, domain: str) -> SiteConfig:
    """Return the site configured for a domain."""
    for site in self.sites:
      if site.domain == domain:
        return site
    raise ValueError(f"No site configured for {domain}")

  @classmethod
  def from_yaml(cls, path: Path | str = "sites.yaml") -> "Config":
    """Load configuration from YAML file."""
    path = Path(path)
    with open(path) as f:
      data = yaml.safe_load(f) or {}

    base_dir = path.parent
    defaults = data.get("defaults") or {}
    sites: list[SiteConfig] = []

    for site_data in data.get("sites") or []:
      # Merge defaults with site-specific config
      merged = {**defaults, **site_data}

      # Convert removal_policy string to enum
      removal_policy = _removal_policy(
        merged.get("domain", ""), merged.pop("removal_policy", "retain")
      )

      content_path = merged.get("content_path")
      metadata_data = merged.get("metadata")

      site = SiteConfig(
        domain=merged.get("domain", ""),
        framework=merged.get("framework", "next"),
        content_path=_resolve(base_dir, content_path) if content_path else None,
        acm_arn_path=merged.get("acm_arn_path", "/portfolio/acmCertArn"),
        region=merged.get("region", "us-east-2"),
        include_www=merged.get("include_www", True),
        hosted_zone_id=merged.get("hosted_zone_id"),
        s3_referer=merged.get("s3_referer") or os.environ.get("S3_REFERER"),
        removal_policy=removal_policy,
        expiry_alarm_days=int(merged.get("expiry_alarm_days", 45)),
        metadata=_metadata(merged.get("domain", ""), metadata_data),
      )
      site.validate()
      for other in sites:
        if other.acm_arn_path == site.acm_arn_path:
          raise ValueError(
            f"Sites {other.domain} and {site.domain} share acm_arn_path "
            f"'{site.acm_arn_path}'"
          )
      sites.append(site)

    # Parse VPS configuration
    vps = None
    vps_data = data.get("vps")
    if vps_data:
      if "domain" not in vps_data:
        raise ValueError("VPS configuration requires a domain")
      vps = VpsConfig(
        domain=vps_data["domain"],
        name=vps_data.get("name", "appServer"),
        server_type=vps_data.get("server_type", "cax11"),
        location=vps_data.get("location", "hel1"),
        os_image=vps_data.get("os_image", "docker-ce"),
        architecture=vps_data.get("architecture", "arm"),
        image_name=vps_data.get("image_name", "cloud-resume/cloud-resume:latest"),
        container_name=vps_data.get("container_name", "cloud-resume"),
        build_context=_resolve(base_dir, vps_data.get("build_context", ".")),
        dockerfile=_resolve(base_dir, vps_data.get("dockerfile", "Dockerfile")),
        platform=vps_data.get("platform", "linux/arm64"),
        ssh_key_path=_resolve(
          base_dir, vps_data.get("ssh_key_path", "id_ed25519_hetzner")
        ),
        open_ports=[int(p) for p in vps_data.get("open_ports", [22, 80, 443])],
        container_ports=[int(p) for p in vps_data.get("container_ports", [80, 443])],
        network_name=vps_data.get("network_name", "app_network_public"),
        proxied=vps_data.get("proxied", True),
        install_tailscale=vps_data.get("install_tailscale", True),
      )

    return cls(sites=sites, vps=vps)


def _resolve(base_dir: Path, value: str | Path) -> Path:
  path = Path(value)
  return path if path.is_absolute() else (base_dir / path).resolve()


def _camel_case(name: str) -> str:
  head, *rest = name.split("_")
  return head + "".join(part.capitalize() for part in rest)


def _metadata(domain: str, data: dict[str, Any] | None) -> SiteMetadata | None:
  if not data:
    return None
  try:
    return SiteMetadata(**data)
  except TypeError as e:
    raise ValueError(f"Site {domain}: invalid metadata ({e})") from e


def _removal_policy(domain: str, value: Any) -> RemovalPolicy:
  policy = REMOVAL_POLICIES.get(str(value).lower()) if value is not None else None
  if policy is None:
    raise ValueError(
      f"Site {domain}: unknown removal_policy '{value}' "
      f"(expected one of {', '.join(REMOVAL_POLICIES)})"
    )
  return policy
