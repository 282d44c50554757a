"""S3 buckets for static website hosting."""

from aws_cdk import RemovalPolicy
from aws_cdk import aws_iam as iam
from aws_cdk import aws_s3 as s3
from constructs import Construct


def _restrict_to_referer(bucket: s3.IBucket, referer: str) -> None:
  """Only serve objects to requests carrying the CloudFront referer secret."""
  objects = f"{bucket.bucket_arn}/*"

  bucket.add_to_resource_policy(
    iam.PolicyStatement(
      actions=["s3:GetObject"],
      resources=[objects],
      principals=[iam.StarPrincipal()],
      conditions={"StringLike": {"aws:Referer": referer}},
    )
  )
  bucket.add_to_resource_policy(
    iam.PolicyStatement(
      effect=iam.Effect.DENY,
      actions=["s3:GetObject"],
      resources=[objects],
      principals=[iam.StarPrincipal()],
      conditions={"StringNotLike": {"aws:Referer": referer}},
    )
  )


# Bucket policy may grant public reads, ACLs stay blocked
_POLICY_ONLY_PUBLIC_ACCESS = s3.BlockPublicAccess(
  block_public_acls=True,
  ignore_public_acls=True,
  block_public_policy=False,
  restrict_public_buckets=False,
)


class StorageBucket(Construct):
  """S3 bucket holding the built site.

  With a referer secret the bucket is an S3 website endpoint readable only by
  CloudFront (which sends the secret as the Referer header). Without one the
  bucket is private and CloudFront reads it through origin access control.
  """

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    referer: str | None = None,
    removal_policy: RemovalPolicy = RemovalPolicy.RETAIN,
  ) -> None:
    super().__init__(scope, id)

    if referer is not None:
      self.bucket = s3.Bucket(
        self,
        "Bucket",
        website_index_document="index.html",
        website_error_document="404.html",
        block_public_access=_POLICY_ONLY_PUBLIC_ACCESS,
        removal_policy=removal_policy,
        auto_delete_objects=removal_policy == RemovalPolicy.DESTROY,
      )
      _restrict_to_referer(self.bucket, referer)
    else:
      self.bucket = s3.Bucket(
        self,
        "Bucket",
        encryption=s3.BucketEncryption.S3_MANAGED,
        block_public_access=s3.BlockPublicAccess.BLOCK_ALL,
        enforce_ssl=True,
        removal_policy=removal_policy,
        auto_delete_objects=removal_policy == RemovalPolicy.DESTROY,
      )


class RedirectBucket(Construct):
  """S3 website bucket redirecting every request to another host over HTTPS."""

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    bucket_name: str,
    redirect_host: str,
    referer: str,
    removal_policy: RemovalPolicy = RemovalPolicy.RETAIN,
  ) -> None:
    super().__init__(scope, id)

    self.bucket = s3.Bucket(
      self,
      "Bucket",
      bucket_name=bucket_name,
      website_redirect=s3.RedirectTarget(
        host_name=redirect_host,
        protocol=s3.RedirectProtocol.HTTPS,
      ),
      block_public_access=_POLICY_ONLY_PUBLIC_ACCESS,
      removal_policy=removal_policy,
      auto_delete_objects=removal_policy == RemovalPolicy.DESTROY,
    )
    _restrict_to_referer(self.bucket, referer)
