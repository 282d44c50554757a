#!/usr/bin/env python3
"""Write a site's metadata as JSON for the static site generator."""

import argparse
import json
import sys
from pathlib import Path

# Add the project root to the Python path
sys.path.insert(0, str(Path(__file__).parent.parent))

from infrastructure.config import Config


def main() -> None:
  """Main entry point."""
  parser = argparse.ArgumentParser(description="Export site metadata as JSON")
  parser.add_argument("domain", help="Site domain as listed in the config")
  parser.add_argument(
    "--config",
    default="sites.yaml",
    help="Path to the sites config (default: sites.yaml)",
  )
  parser.add_argument(
    "--output",
    "-o",
    help="File to write (default: stdout)",
  )

  args = parser.parse_args()

  try:
    site = Config.from_yaml(args.config).site(args.domain)
  except (OSError, ValueError) as e:
    print(f"Error loading config: {e}", file=sys.stderr)
    sys.exit(1)

  if site.metadata is None:
    print(f"No metadata configured for {site.domain}", file=sys.stderr)
    sys.exit(1)

  content = json.dumps(site.metadata.to_dict(), indent=2, ensure_ascii=False) + "\n"
  if args.output:
    Path(args.output).write_text(content, encoding="utf-8")
    print(f"Wrote metadata for {site.domain} to {args.output}")
  else:
    print(content, end="")


if __name__ == "__main__":
  main()
