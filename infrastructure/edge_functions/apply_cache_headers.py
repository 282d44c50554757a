"""Origin-response handler that sets Cache-Control on every object."""

from typing import Any

ONE_DAY = 86400
ONE_WEEK = ONE_DAY * 7

# Next.js emits content-hashed bundles under this prefix
STATIC_ASSET_PREFIX = "/_next/static/"


def cache_control_for(uri: str) -> str:
  """Return the Cache-Control value for a request URI."""
  max_age = ONE_WEEK if STATIC_ASSET_PREFIX in uri else ONE_DAY
  return f"max-age={max_age}"


def handler(event: dict[str, Any], context: Any) -> dict[str, Any]:
  """Lambda@Edge origin-response entry point."""
  cf = event["Records"][0]["cf"]
  request = cf["request"]
  response = cf["response"]

  headers = response.setdefault("headers", {})
  headers["cache-control"] = [
    {"key": "Cache-Control", "value": cache_control_for(request["uri"])}
  ]

  return response
