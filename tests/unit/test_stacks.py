"""Tests for the certificate and site stacks."""

import aws_cdk as cdk
import pytest
from aws_cdk.assertions import Match, Template

from infrastructure.app import build_app
from infrastructure.config import Config, SiteConfig
from infrastructure.stacks import CertificateStack, StaticSiteStack

ACCOUNT = "123456789012"


class TestCertificateStack:
  """Test the us-east-1 certificate stack."""

  @pytest.fixture
  def template(self) -> Template:
    app = cdk.App()
    stack = CertificateStack(
      app,
      "CertificateStack",
      site_config=SiteConfig(domain="example.com", framework="astro"),
      env=cdk.Environment(region="us-east-1"),
    )
    return Template.from_stack(stack)

  def test_certificate_with_dns_validation(self, template: Template) -> None:
    """Verify certificate covers the apex and subdomains."""
    template.has_resource_properties(
      "AWS::CertificateManager::Certificate",
      {
        "DomainName": "example.com",
        "SubjectAlternativeNames": ["*.example.com"],
        "ValidationMethod": "DNS",
      },
    )

  def test_expiry_alarm(self, template: Template) -> None:
    """Verify the alarm fires when fewer than 45 days remain."""
    template.has_resource_properties(
      "AWS::CloudWatch::Alarm",
      {
        "ComparisonOperator": "LessThanThreshold",
        "EvaluationPeriods": 1,
        "MetricName": "DaysToExpiry",
        "Namespace": "AWS/CertificateManager",
        "Period": 86400,
        "Statistic": "Minimum",
        "Threshold": 45,
      },
    )

  def test_arn_parameter(self, template: Template) -> None:
    """Verify the SSM parameter for referencing the cert ARN."""
    template.has_resource_properties(
      "AWS::SSM::Parameter",
      {
        "Type": "String",
        "Name": "/portfolio/acmCertArn",
        "Value": {"Ref": Match.any_value()},
      },
    )


class TestCertificateStackWithHostedZone:
  """Test automatic validation through Route 53."""

  def test_validation_uses_hosted_zone(self) -> None:
    app = cdk.App()
    stack = CertificateStack(
      app,
      "CertificateStack",
      site_config=SiteConfig(
        domain="example.com",
        framework="astro",
        hosted_zone_id="Z1234567890",
        expiry_alarm_days=30,
      ),
      env=cdk.Environment(region="us-east-1"),
    )
    template = Template.from_stack(stack)

    template.has_resource_properties(
      "AWS::CertificateManager::Certificate",
      {
        "DomainValidationOptions": Match.array_with(
          [{"DomainName": "example.com", "HostedZoneId": "Z1234567890"}]
        ),
      },
    )
    template.has_resource_properties("AWS::CloudWatch::Alarm", {"Threshold": 30})


class TestStaticSiteStack:
  """Test the regional site stack."""

  @pytest.fixture
  def template(self) -> Template:
    app = cdk.App()
    stack = StaticSiteStack(
      app,
      "SiteStack",
      site_config=SiteConfig(
        domain="example.com",
        framework="next",
        s3_referer="referer-secret",
      ),
      env=cdk.Environment(account=ACCOUNT, region="us-east-2"),
    )
    return Template.from_stack(stack)

  def test_fetches_certificate_arn(self, template: Template) -> None:
    """Verify the custom resource reading the ARN from us-east-1."""
    template.resource_count_is("Custom::FetchCertArn", 1)
    template.has_resource_properties(
      "Custom::FetchCertArn",
      {"InstallLatestAwsSdk": False},
    )

  def test_fetch_policy_limited_to_parameter(self, template: Template) -> None:
    template.has_resource_properties(
      "AWS::IAM::Policy",
      {
        "PolicyDocument": {
          "Statement": [
            {
              "Action": "ssm:GetParameter",
              "Effect": "Allow",
              "Resource": "arn:aws:ssm:us-east-1:*:parameter/portfolio/acmCertArn",
            }
          ],
          "Version": "2012-10-17",
        },
      },
    )

  def test_edge_function_read_across_regions(self, template: Template) -> None:
    """Lambda@Edge lives in us-east-1, its version ARN is read back here."""
    template.resource_count_is("Custom::CrossRegionStringParameterReader", 1)
    template.resource_count_is("AWS::CloudFront::Distribution", 2)


class TestBuildApp:
  """Test the CDK app wiring."""

  def test_stacks_per_site(self) -> None:
    app = cdk.App()
    config = Config(
      sites=[
        SiteConfig(domain="example.com", framework="astro"),
        SiteConfig(
          domain="example.org",
          framework="next",
          s3_referer="secret",
          acm_arn_path="/example-org/acmCertArn",
          region="eu-west-1",
        ),
      ]
    )

    build_app(app, config, ACCOUNT)

    certificate_stack = app.node.find_child("Certificate-example-com")
    site_stack = app.node.find_child("StaticSite-example-com")
    assert isinstance(certificate_stack, CertificateStack)
    assert isinstance(site_stack, StaticSiteStack)
    assert certificate_stack.region == "us-east-1"
    assert site_stack.region == "us-east-2"
    dependencies = [stack.stack_name for stack in site_stack.dependencies]
    assert certificate_stack.stack_name in dependencies

    other_site = app.node.find_child("StaticSite-example-org")
    assert isinstance(other_site, StaticSiteStack)
    assert other_site.region == "eu-west-1"
    assert other_site.account == ACCOUNT
