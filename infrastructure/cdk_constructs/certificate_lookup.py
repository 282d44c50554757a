"""Cross-region lookup of the certificate ARN stored in SSM."""

from aws_cdk import aws_certificatemanager as acm
from aws_cdk import custom_resources as cr
from constructs import Construct


class CertificateArnLookup(Construct):
  """Read the certificate ARN parameter from the certificate region.

  CloudFront only accepts certificates from us-east-1 while the site stack may
  live elsewhere, so the ARN is fetched with an SDK call at deploy time.
  """

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    parameter_name: str,
    certificate_region: str = "us-east-1",
  ) -> None:
    super().__init__(scope, id)

    parameter_arn = f"arn:aws:ssm:{certificate_region}:*:parameter{parameter_name}"

    self.resource = cr.AwsCustomResource(
      self,
      "FetchCertArn",
      resource_type="Custom::FetchCertArn",
      on_update=cr.AwsSdkCall(
        service="SSM",
        action="getParameter",
        region=certificate_region,
        parameters={"Name": parameter_name},
        physical_resource_id=cr.PhysicalResourceId.of(f"cert{parameter_name}"),
      ),
      policy=cr.AwsCustomResourcePolicy.from_sdk_calls(resources=[parameter_arn]),
      install_latest_aws_sdk=False,
    )

    self.certificate_arn = self.resource.get_response_field("Parameter.Value")
    self.certificate = acm.Certificate.from_certificate_arn(
      self, "Certificate", self.certificate_arn
    )
