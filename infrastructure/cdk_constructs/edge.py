"""Lambda@Edge functions attached to the site distribution."""

from aws_cdk import Duration
from aws_cdk import aws_cloudfront as cloudfront
from aws_cdk import aws_lambda as lambda_
from aws_cdk.aws_cloudfront import experimental
from constructs import Construct

from ..edge_functions import EDGE_FUNCTIONS_DIR


class EdgeHandlers(Construct):
  """Edge functions needed by a site framework.

  - next: origin-response handler applying Cache-Control headers
  - astro: viewer-request handler rewriting sub-page URIs to index.html

  EdgeFunction deploys into us-east-1 through a support stack when the parent
  stack lives in another region.
  """

  def __init__(self, scope: Construct, id: str, *, framework: str) -> None:
    super().__init__(scope, id)

    self.edge_lambdas: list[cloudfront.EdgeLambda] = []

    if framework == "next":
      self._add(
        "ApplyCacheHeaders",
        handler="apply_cache_headers.handler",
        description="Applies Cache-Control headers to origin responses",
        event_type=cloudfront.LambdaEdgeEventType.ORIGIN_RESPONSE,
      )
    elif framework == "astro":
      self._add(
        "FixSubPages",
        handler="rewrite_sub_pages.handler",
        description="Redirects sub-page requests to their index.html",
        event_type=cloudfront.LambdaEdgeEventType.VIEWER_REQUEST,
      )
    else:
      raise ValueError(f"Unknown framework '{framework}'")

  def _add(
    self,
    id: str,
    *,
    handler: str,
    description: str,
    event_type: cloudfront.LambdaEdgeEventType,
  ) -> None:
    function = experimental.EdgeFunction(
      self,
      id,
      runtime=lambda_.Runtime.PYTHON_3_12,
      handler=handler,
      code=lambda_.Code.from_asset(
        str(EDGE_FUNCTIONS_DIR),
        exclude=["__pycache__", "*.pyc"],
      ),
      description=description,
      memory_size=128,
      timeout=Duration.seconds(5),
    )
    self.edge_lambdas.append(
      cloudfront.EdgeLambda(
        function_version=function.current_version,
        event_type=event_type,
      )
    )
