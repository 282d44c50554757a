#!/usr/bin/env python3
"""Print the ACM certificate ARN a site's certificate stack published to SSM."""

import argparse
import json
import sys
from pathlib import Path

import boto3  # type: ignore[import-not-found]
from botocore.exceptions import ClientError

# Add the project root to the Python path
sys.path.insert(0, str(Path(__file__).parent.parent))

from infrastructure.config import CERTIFICATE_REGION, Config


def get_certificate_arn(parameter_name: str, region: str = CERTIFICATE_REGION) -> str:
  """Read the certificate ARN parameter.

  Args:
    parameter_name: SSM parameter path (e.g., '/portfolio/acmCertArn')
    region: AWS region holding the certificate

  Returns:
    The certificate ARN
  """
  ssm = boto3.client("ssm", region_name=region)
  response = ssm.get_parameter(Name=parameter_name)
  return str(response["Parameter"]["Value"])


def main() -> None:
  """Main entry point."""
  parser = argparse.ArgumentParser(
    description="Print the certificate ARN for a configured site"
  )
  parser.add_argument(
    "domain",
    help="Site domain as listed in the config (e.g., ryan17.dev)",
  )
  parser.add_argument(
    "--config",
    default="sites.yaml",
    help="Path to the sites config (default: sites.yaml)",
  )
  parser.add_argument(
    "--region",
    default=CERTIFICATE_REGION,
    help=f"AWS region (default: {CERTIFICATE_REGION})",
  )
  parser.add_argument(
    "--format",
    choices=["plain", "env", "json"],
    default="plain",
    help="Output format (default: plain)",
  )

  args = parser.parse_args()

  try:
    site = Config.from_yaml(args.config).site(args.domain)
  except (OSError, ValueError) as e:
    print(f"Error loading config: {e}", file=sys.stderr)
    sys.exit(1)

  try:
    arn = get_certificate_arn(site.acm_arn_path, args.region)
  except ClientError as e:
    print(f"Error reading {site.acm_arn_path}: {e}", file=sys.stderr)
    sys.exit(1)

  if args.format == "json":
    print(json.dumps({"domain": site.domain, "certificateArn": arn}, indent=2))
  elif args.format == "env":
    print(f"ACM_CERT_ARN={arn}")
  else:
    print(arn)


if __name__ == "__main__":
  main()
