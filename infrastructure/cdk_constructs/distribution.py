"""CloudFront distribution for static website."""

from aws_cdk import Duration
from aws_cdk import aws_certificatemanager as acm
from aws_cdk import aws_cloudfront as cloudfront
from aws_cdk import aws_cloudfront_origins as origins
from aws_cdk import aws_s3 as s3
from constructs import Construct


class CloudFrontDistribution(Construct):
  """CloudFront distribution in front of a site bucket.

  Website buckets are reached over HTTP at their website endpoint with the
  referer secret attached; private buckets through origin access control.
  """

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    bucket: s3.IBucket,
    certificate: acm.ICertificate,
    domain_names: list[str],
    referer: str | None = None,
    default_root_object: str | None = None,
    edge_lambdas: list[cloudfront.EdgeLambda] | None = None,
    error_page: str | None = None,
    comment: str | None = None,
  ) -> None:
    super().__init__(scope, id)

    if referer is not None:
      origin: cloudfront.IOrigin = origins.S3StaticWebsiteOrigin(
        bucket,
        protocol_policy=cloudfront.OriginProtocolPolicy.HTTP_ONLY,
        custom_headers={"Referer": referer},
      )
    else:
      origin = origins.S3BucketOrigin.with_origin_access_control(bucket)

    error_responses = None
    if error_page:
      error_responses = [
        cloudfront.ErrorResponse(
          http_status=status,
          response_http_status=404,
          response_page_path=error_page,
          ttl=Duration.minutes(5),
        )
        # Private buckets answer 403 for missing keys
        for status in (403, 404)
      ]

    self.distribution = cloudfront.Distribution(
      self,
      "Distribution",
      comment=comment,
      default_behavior=cloudfront.BehaviorOptions(
        origin=origin,
        viewer_protocol_policy=cloudfront.ViewerProtocolPolicy.REDIRECT_TO_HTTPS,
        allowed_methods=cloudfront.AllowedMethods.ALLOW_GET_HEAD,
        cached_methods=cloudfront.CachedMethods.CACHE_GET_HEAD,
        compress=True,
        edge_lambdas=edge_lambdas or None,
      ),
      domain_names=domain_names,
      certificate=certificate,
      default_root_object=default_root_object,
      error_responses=error_responses,
      price_class=cloudfront.PriceClass.PRICE_CLASS_100,
      http_version=cloudfront.HttpVersion.HTTP2,
      enable_ipv6=True,
      minimum_protocol_version=cloudfront.SecurityPolicyProtocol.TLS_V1_2_2021,
    )
