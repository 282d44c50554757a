"""CDK stack for a single static website."""

from typing import Any

import aws_cdk as cdk
from constructs import Construct

from infrastructure.cdk_constructs import CertificateArnLookup, StaticSiteConstruct
from infrastructure.config import SiteConfig


class StaticSiteStack(cdk.Stack):
  """Stack for a single static website.

  The certificate is created by the CertificateStack in us-east-1 and looked
  up here through its SSM parameter.
  """

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    site_config: SiteConfig,
    **kwargs: Any,
  ) -> None:
    super().__init__(scope, id, **kwargs)

    self.certificate_lookup = CertificateArnLookup(
      self,
      "CertificateLookup",
      parameter_name=site_config.acm_arn_path,
      certificate_region=site_config.certificate_region,
    )

    self.site = StaticSiteConstruct(
      self,
      "Site",
      domain_name=site_config.domain,
      certificate=self.certificate_lookup.certificate,
      framework=site_config.framework,
      content_path=site_config.content_path,
      include_www=site_config.include_www,
      referer=site_config.s3_referer,
      hosted_zone_id=site_config.hosted_zone_id,
      removal_policy=site_config.removal_policy,
    )

    cdk.Tags.of(self).add("Project", "portfolio")
    cdk.Tags.of(self).add("Domain", site_config.domain)
