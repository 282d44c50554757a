"""ACM certificate with DNS validation, expiry alarm and SSM export."""

from aws_cdk import aws_certificatemanager as acm
from aws_cdk import aws_cloudwatch as cloudwatch
from aws_cdk import aws_route53 as route53
from aws_cdk import aws_ssm as ssm
from constructs import Construct


class DnsValidatedCertificate(Construct):
  """ACM certificate with DNS validation (no email approval needed).

  The certificate ARN is published to an SSM parameter so that stacks in other
  regions can look it up (see CertificateArnLookup). A CloudWatch alarm fires
  when renewal has not happened and the certificate is close to expiring.
  """

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    domain_name: str,
    arn_parameter_name: str,
    hosted_zone: route53.IHostedZone | None = None,
    expiry_alarm_days: int = 45,
  ) -> None:
    super().__init__(scope, id)

    self.certificate = acm.Certificate(
      self,
      "Certificate",
      domain_name=domain_name,
      subject_alternative_names=[f"*.{domain_name}"],
      # Without a hosted zone the validation records are created by hand
      validation=acm.CertificateValidation.from_dns(hosted_zone),
    )

    self.expiry_alarm = self.certificate.metric_days_to_expiry().create_alarm(
      self,
      "CertExpiry",
      alarm_description=f"ACM certificate for {domain_name} is close to expiring",
      evaluation_periods=1,
      threshold=expiry_alarm_days,
      comparison_operator=cloudwatch.ComparisonOperator.LESS_THAN_THRESHOLD,
      treat_missing_data=cloudwatch.TreatMissingData.NOT_BREACHING,
    )

    self.arn_parameter = ssm.StringParameter(
      self,
      "CertArn",
      parameter_name=arn_parameter_name,
      description=f"ACM certificate ARN for {domain_name}",
      string_value=self.certificate.certificate_arn,
    )
