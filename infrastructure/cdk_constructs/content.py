"""Deployment of the built site into its bucket."""

from pathlib import Path

from aws_cdk import aws_cloudfront as cloudfront
from aws_cdk import aws_s3 as s3
from aws_cdk import aws_s3_deployment as s3_deploy
from constructs import Construct


class SiteContent(Construct):
  """Uploads the static site build output and invalidates the CDN cache."""

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    content_path: Path,
    bucket: s3.IBucket,
    distribution: cloudfront.IDistribution,
  ) -> None:
    super().__init__(scope, id)

    if not content_path.is_dir():
      raise ValueError(
        f"Site content path does not exist: {content_path}. "
        "Build the site before CDK synth/deploy."
      )

    self.deployment = s3_deploy.BucketDeployment(
      self,
      "Deployment",
      sources=[s3_deploy.Source.asset(str(content_path))],
      destination_bucket=bucket,
      distribution=distribution,
      distribution_paths=["/*"],
    )
