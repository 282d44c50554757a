"""CDK stack for the site certificate (must be deployed to us-east-1)."""

from typing import Any

import aws_cdk as cdk
from constructs import Construct

from infrastructure.cdk_constructs import DnsValidatedCertificate
from infrastructure.cdk_constructs.dns import import_hosted_zone
from infrastructure.config import SiteConfig


class CertificateStack(cdk.Stack):
  """Stack for the ACM certificate shared with the site stack via SSM."""

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    site_config: SiteConfig,
    **kwargs: Any,
  ) -> None:
    super().__init__(scope, id, **kwargs)

    hosted_zone = None
    if site_config.hosted_zone_id:
      hosted_zone = import_hosted_zone(
        self,
        "HostedZone",
        domain_name=site_config.domain,
        hosted_zone_id=site_config.hosted_zone_id,
      )

    self.certificate = DnsValidatedCertificate(
      self,
      "Certificate",
      domain_name=site_config.domain,
      arn_parameter_name=site_config.acm_arn_path,
      hosted_zone=hosted_zone,
      expiry_alarm_days=site_config.expiry_alarm_days,
    )

    cdk.CfnOutput(
      self,
      "CertificateArn",
      value=self.certificate.arn_parameter.string_value,
      description="ACM certificate ARN",
    )

    cdk.Tags.of(self).add("Project", "portfolio")
    cdk.Tags.of(self).add("Domain", site_config.domain)
