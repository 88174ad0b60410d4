"""In-memory social graph analyses.

This package provides:
- Graph structures (socialgraph.graph): adjacency graph and union-find
- Network facade (socialgraph.network): keeps both structures in lockstep
- Loading (socialgraph.loader): JSON network files
- Audit (socialgraph.audit): structured JSONL event logging
- CLI (socialgraph.cli): command-line interface
"""

__version__ = "0.1.0"
__license__ = "MIT"

from socialgraph.config import NetworkConfig
from socialgraph.errors import (
    NetworkFileError,
    SelfFriendshipError,
    SocialGraphError,
    UnknownUserError,
)
from socialgraph.graph import AdjacencyGraph, UnionFind
from socialgraph.loader import load_network
from socialgraph.models import Recommendation
from socialgraph.network import SocialNetwork
from socialgraph.sample import build_sample_network

__all__ = [
    "__version__",
    "__license__",
    "AdjacencyGraph",
    "UnionFind",
    "SocialNetwork",
    "NetworkConfig",
    "Recommendation",
    "load_network",
    "build_sample_network",
    "SocialGraphError",
    "UnknownUserError",
    "SelfFriendshipError",
    "NetworkFileError",
]
