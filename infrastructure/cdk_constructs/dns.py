"""Route 53 DNS constructs."""

from aws_cdk import aws_cloudfront as cloudfront
from aws_cdk import aws_route53 as route53
from aws_cdk import aws_route53_targets as targets
from constructs import Construct


def import_hosted_zone(
  scope: Construct, id: str, *, domain_name: str, hosted_zone_id: str
) -> route53.IHostedZone:
  """Import an existing hosted zone without a context lookup."""
  return route53.HostedZone.from_hosted_zone_attributes(
    scope,
    id,
    hosted_zone_id=hosted_zone_id,
    zone_name=domain_name,
  )


class DnsRecords(Construct):
  """Alias records in an existing hosted zone pointing at CloudFront."""

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    domain_name: str,
    hosted_zone_id: str,
  ) -> None:
    super().__init__(scope, id)

    self.hosted_zone = import_hosted_zone(
      self, "HostedZone", domain_name=domain_name, hosted_zone_id=hosted_zone_id
    )

  def add_alias(
    self,
    id: str,
    *,
    record_name: str,
    distribution: cloudfront.IDistribution,
  ) -> None:
    """Create A and AAAA records for record_name."""
    target = route53.RecordTarget.from_alias(targets.CloudFrontTarget(distribution))

    route53.ARecord(
      self,
      f"{id}ARecord",
      zone=self.hosted_zone,
      record_name=record_name,
      target=target,
    )
    route53.AaaaRecord(
      self,
      f"{id}AAAARecord",
      zone=self.hosted_zone,
      record_name=record_name,
      target=target,
    )
