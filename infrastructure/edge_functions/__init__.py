"""Lambda@Edge handlers packaged as a single code asset."""

from pathlib import Path

EDGE_FUNCTIONS_DIR = Path(__file__).parent
