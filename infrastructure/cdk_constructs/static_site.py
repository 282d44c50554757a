"""Main composite construct for complete static website infrastructure."""

from pathlib import Path

from aws_cdk import CfnOutput, RemovalPolicy
from aws_cdk import aws_certificatemanager as acm
from constructs import Construct

from .content import SiteContent
from .distribution import CloudFrontDistribution
from .dns import DnsRecords
from .edge import EdgeHandlers
from .storage import RedirectBucket, StorageBucket


class StaticSiteConstruct(Construct):
  """Complete static website infrastructure.

  next sites (exported Next.js build):
  - S3 website bucket readable only with the CloudFront referer secret
  - Lambda@Edge applying Cache-Control headers on origin responses
  - CloudFront distribution for the apex domain
  - (Optional) www bucket + distribution redirecting to the apex

  astro sites:
  - Private S3 bucket behind origin access control
  - Lambda@Edge rewriting sub-page URIs on viewer requests
  - One CloudFront distribution serving the apex and www domains

  Both:
  - (Optional) Deployment of the built site with cache invalidation
  - (Optional) Route 53 alias records when a hosted zone is given
  """

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    domain_name: str,
    certificate: acm.ICertificate,
    framework: str = "next",
    content_path: Path | None = None,
    include_www: bool = True,
    referer: str | None = None,
    hosted_zone_id: str | None = None,
    removal_policy: RemovalPolicy = RemovalPolicy.RETAIN,
  ) -> None:
    super().__init__(scope, id)

    if framework == "next" and not referer:
      raise ValueError(f"{domain_name}: next sites need a referer secret")

    www_domain = f"www.{domain_name}"
    website_referer = referer if framework == "next" else None

    # Storage
    self.bucket = StorageBucket(
      self,
      "Storage",
      referer=website_referer,
      removal_policy=removal_policy,
    )

    # Edge functions
    self.edge = EdgeHandlers(self, "Edge", framework=framework)

    # CloudFront Distribution
    if framework == "astro":
      domain_names = [domain_name, www_domain] if include_www else [domain_name]
      self.distribution = CloudFrontDistribution(
        self,
        "Distribution",
        bucket=self.bucket.bucket,
        certificate=certificate,
        domain_names=domain_names,
        default_root_object="index.html",
        edge_lambdas=self.edge.edge_lambdas,
        error_page="/404.html",
        comment=f"{domain_name} (astro)",
      )
    else:
      self.distribution = CloudFrontDistribution(
        self,
        "Distribution",
        bucket=self.bucket.bucket,
        certificate=certificate,
        domain_names=[domain_name],
        referer=website_referer,
        edge_lambdas=self.edge.edge_lambdas,
        comment=f"{domain_name} (next)",
      )

    # www redirect for website buckets
    self.www_distribution: CloudFrontDistribution | None = None
    if framework == "next" and include_www:
      self.www_bucket = RedirectBucket(
        self,
        "WwwStorage",
        bucket_name=www_domain,
        redirect_host=domain_name,
        referer=website_referer,
        removal_policy=removal_policy,
      )
      self.www_distribution = CloudFrontDistribution(
        self,
        "WwwDistribution",
        bucket=self.www_bucket.bucket,
        certificate=certificate,
        domain_names=[www_domain],
        referer=website_referer,
        default_root_object="index.html",
        comment=f"{www_domain} redirect",
      )

    # Built site content
    if content_path is not None:
      self.content = SiteContent(
        self,
        "Content",
        content_path=content_path,
        bucket=self.bucket.bucket,
        distribution=self.distribution.distribution,
      )

    # DNS Records pointing to CloudFront
    if hosted_zone_id:
      self.dns = DnsRecords(
        self,
        "Dns",
        domain_name=domain_name,
        hosted_zone_id=hosted_zone_id,
      )
      self.dns.add_alias(
        "Apex",
        record_name=domain_name,
        distribution=self.distribution.distribution,
      )
      if include_www:
        self.dns.add_alias(
          "Www",
          record_name=www_domain,
          distribution=(
            self.www_distribution or self.distribution
          ).distribution,
        )

    # Outputs
    CfnOutput(
      self,
      "BucketName",
      value=self.bucket.bucket.bucket_name,
      description="S3 bucket name",
    )
    CfnOutput(
      self,
      "DistributionId",
      value=self.distribution.distribution.distribution_id,
      description="CloudFront distribution ID",
    )
    CfnOutput(
      self,
      "DistributionDomainName",
      value=self.distribution.distribution.distribution_domain_name,
      description="CloudFront distribution domain name",
    )
    CfnOutput(
      self,
      "Url",
      value=f"https://{domain_name}",
      description="Site URL",
    )
