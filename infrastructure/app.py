#!/usr/bin/env python3
"""CDK application entry point for the portfolio site infrastructure."""

import sys
from pathlib import Path

# Add the project root to the Python path
sys.path.insert(0, str(Path(__file__).parent.parent))

import aws_cdk as cdk
import boto3

from infrastructure.config import Config
from infrastructure.stacks.certificate_stack import CertificateStack
from infrastructure.stacks.site_stack import StaticSiteStack


def get_account_id() -> str:
  """Get AWS account ID from current credentials."""
  sts = boto3.client("sts")
  return str(sts.get_caller_identity()["Account"])


def build_app(app: cdk.App, config: Config, account_id: str) -> None:
  """Add a certificate stack and a site stack for every configured site."""
  for site in config.sites:
    certificate_stack = CertificateStack(
      app,
      f"Certificate-{site.stack_suffix}",
      site_config=site,
      env=cdk.Environment(account=account_id, region=site.certificate_region),
      description=f"ACM certificate for {site.domain}",
    )

    site_stack = StaticSiteStack(
      app,
      f"StaticSite-{site.stack_suffix}",
      site_config=site,
      env=cdk.Environment(account=account_id, region=site.region),
      description=f"Static website infrastructure for {site.domain}",
    )
    # The SSM parameter must exist before the site stack reads it
    site_stack.add_dependency(certificate_stack)


def main() -> None:
  """Create CDK app with stacks for each configured site."""
  app = cdk.App()

  # Load configuration
  config_path = app.node.try_get_context("config") or "sites.yaml"
  config = Config.from_yaml(Path(config_path))

  # Get account ID from credentials
  account_id = get_account_id()

  build_app(app, config, account_id)
  print(f"Synthesizing {len(config.sites)} site(s) for account {account_id}")

  app.synth()


if __name__ == "__main__":
  main()
