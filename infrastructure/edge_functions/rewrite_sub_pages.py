"""Viewer-request handler mapping directory-style URIs to index.html objects.

Private S3 origins have no website hosting, so ``/blog/`` and ``/blog`` must be
rewritten to the ``/blog/index.html`` key the static site generator produced.
"""

from typing import Any


def rewrite_uri(uri: str) -> str:
  """Return the object key URI for a viewer URI."""
  # Missing a file name
  if uri.endswith("/"):
    return uri + "index.html"
  # Missing a file extension
  if "." not in uri:
    return uri + "/index.html"
  return uri


def handler(event: dict[str, Any], context: Any) -> dict[str, Any]:
  """Lambda@Edge viewer-request entry point."""
  request = event["Records"][0]["cf"]["request"]
  request["uri"] = rewrite_uri(request["uri"])
  return request
