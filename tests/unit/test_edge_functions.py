"""Tests for the Lambda@Edge handlers."""

from typing import Any

import pytest

from infrastructure.edge_functions import apply_cache_headers, rewrite_sub_pages


def origin_response_event(uri: str, headers: dict[str, Any] | None = None) -> dict:
  return {
    "Records": [
      {
        "cf": {
          "config": {"distributionId": "EDFDVBD6EXAMPLE", "eventType": "origin-response"},
          "request": {"uri": uri, "method": "GET", "headers": {}},
          "response": {
            "status": "200",
            "statusDescription": "OK",
            "headers": headers if headers is not None else {},
          },
        }
      }
    ]
  }


def viewer_request_event(uri: str) -> dict:
  return {
    "Records": [
      {
        "cf": {
          "config": {"distributionId": "EDFDVBD6EXAMPLE", "eventType": "viewer-request"},
          "request": {"uri": uri, "method": "GET", "querystring": "", "headers": {}},
        }
      }
    ]
  }


class TestApplyCacheHeaders:
  """Tests for the origin-response cache header handler."""

  @pytest.mark.parametrize(
    "uri",
    [
      "/_next/static/chunks/main-abc123.js",
      "/_next/static/css/styles.css",
      "/blog/_next/static/media/font.woff2",
    ],
  )
  def test_static_assets_cached_for_a_week(self, uri: str) -> None:
    response = apply_cache_headers.handler(origin_response_event(uri), None)

    assert response["headers"]["cache-control"] == [
      {"key": "Cache-Control", "value": "max-age=604800"}
    ]

  @pytest.mark.parametrize("uri", ["/", "/index.html", "/blog/post", "/_next/data/x.json"])
  def test_other_paths_cached_for_a_day(self, uri: str) -> None:
    response = apply_cache_headers.handler(origin_response_event(uri), None)

    assert response["headers"]["cache-control"] == [
      {"key": "Cache-Control", "value": "max-age=86400"}
    ]

  def test_replaces_origin_cache_control(self) -> None:
    """An existing Cache-Control from S3 is overwritten."""
    event = origin_response_event(
      "/index.html",
      headers={
        "cache-control": [{"key": "Cache-Control", "value": "no-cache"}],
        "content-type": [{"key": "Content-Type", "value": "text/html"}],
      },
    )

    response = apply_cache_headers.handler(event, None)

    assert response["headers"]["cache-control"][0]["value"] == "max-age=86400"
    assert response["headers"]["content-type"][0]["value"] == "text/html"

  def test_returns_the_response_object(self) -> None:
    event = origin_response_event("/")
    response = apply_cache_headers.handler(event, None)
    assert response is event["Records"][0]["cf"]["response"]
    assert response["status"] == "200"

  def test_cache_control_values(self) -> None:
    assert apply_cache_headers.ONE_WEEK == 604800
    assert apply_cache_headers.cache_control_for("/_next/static/a.js") == "max-age=604800"
    assert apply_cache_headers.cache_control_for("/about") == "max-age=86400"


class TestRewriteSubPages:
  """Tests for the viewer-request URI rewrite handler."""

  @pytest.mark.parametrize(
    ("uri", "expected"),
    [
      ("/", "/index.html"),
      ("/blog/", "/blog/index.html"),
      ("/blog", "/blog/index.html"),
      ("/tags/aws", "/tags/aws/index.html"),
      ("/blog/post.html", "/blog/post.html"),
      ("/favicon.ico", "/favicon.ico"),
      ("/static/images/avatar.png", "/static/images/avatar.png"),
    ],
  )
  def test_rewrite_uri(self, uri: str, expected: str) -> None:
    assert rewrite_sub_pages.rewrite_uri(uri) == expected

  def test_dot_anywhere_leaves_uri_unchanged(self) -> None:
    """Only URIs without any dot get /index.html appended."""
    assert rewrite_sub_pages.rewrite_uri("/v1.2/docs") == "/v1.2/docs"

  def test_handler_rewrites_request(self) -> None:
    event = viewer_request_event("/blog")

    request = rewrite_sub_pages.handler(event, None)

    assert request["uri"] == "/blog/index.html"
    assert request["method"] == "GET"
    assert request is event["Records"][0]["cf"]["request"]

  def test_handler_leaves_files_alone(self) -> None:
    request = rewrite_sub_pages.handler(viewer_request_event("/rss.xml"), None)
    assert request["uri"] == "/rss.xml"
