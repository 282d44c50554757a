"""Pytest fixtures for CDK construct tests."""

from pathlib import Path

import pytest


@pytest.fixture
def site_dir(tmp_path: Path) -> Path:
  """Create a minimal built site."""
  dist = tmp_path / "dist"
  dist.mkdir()
  (dist / "index.html").write_text("<h1>Hello</h1>")
  (dist / "404.html").write_text("<h1>Not found</h1>")
  return dist
