"""Shared fixtures for codec and adapter tests."""

import pathlib
import shutil
import sys
import tempfile
from pathlib import Path

import pytest

ROOT = pathlib.Path(__file__).resolve().parents[1]  # project root
sys.path.insert(0, str(ROOT))
sys.path.insert(0, str(ROOT / "tests"))

from helpers import MIXED_NET  # noqa: E402

from pajeknet.core.graph import Network  # noqa: E402

# ======================================================================
# FIXTURES
# ======================================================================


@pytest.fixture
def mixed_net_text():
    """Ten vertices, every edge section kind, comments and blank lines."""
    return MIXED_NET


@pytest.fixture
def numbered_network():
    """Mixed network of ten vertices named "1".."10", only vertex 1 placed."""
    G = Network()
    ids = G.add_vertices_bulk({"name": str(i + 1)} for i in range(10))
    G.set_location(ids[0], 0.12, 0.34)
    G.add_edge(ids[0], ids[1], edge_directed=False, weight=1.23)
    G.add_edge(ids[1], ids[2], edge_directed=True, weight=2.01)
    G.add_edge(ids[2], ids[3], edge_directed=False, weight=5.11)
    G.add_edge(ids[3], ids[4], edge_directed=True)  # no weight
    return G


@pytest.fixture
def tmpdir_fixture():
    """Temporary directory for file I/O (input/output) tests."""
    tmpdir = Path(tempfile.mkdtemp())
    yield tmpdir
    shutil.rmtree(tmpdir)
