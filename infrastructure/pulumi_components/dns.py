"""Cloudflare DNS records for the VPS."""

import pulumi
import pulumi_cloudflare as cloudflare


class CloudflareRecords(pulumi.ComponentResource):
  """Proxied A records for the apex and www names."""

  def __init__(
    self,
    name: str,
    *,
    domain: str,
    zone_id: pulumi.Input[str],
    address: pulumi.Input[str],
    proxied: bool = True,
    depends_on: list[pulumi.Resource] | None = None,
    opts: pulumi.ResourceOptions | None = None,
  ):
    super().__init__("portfolio:vps:CloudflareRecords", name, None, opts)

    self.records = [
      cloudflare.DnsRecord(
        f"{name}-{label}",
        zone_id=zone_id,
        name=record_name,
        type="A",
        content=address,
        # ttl=1 means automatic, required for proxied records
        ttl=1,
        proxied=proxied,
        opts=pulumi.ResourceOptions(parent=self, depends_on=depends_on),
      )
      for label, record_name in (("root", domain), ("www", f"www.{domain}"))
    ]

    self.register_outputs({
      "hostnames": [record.name for record in self.records],
    })
