"""
logictree - Hierarchical problem analysis with logic trees

logictree keeps an in-memory problem-decomposition tree (problems, causes,
effects, solutions, decisions, options) and analyses it: MECE checks, gap
detection, feasibility and actionability scoring, hypothesis prompts and
workflow guidance. The tree is exposed to AI agents over MCP.
"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("logictree")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"  # Not installed
__license__ = "MIT"

from logictree.graph import LogicNode, LogicTree, NodeMetadata, NodeType

__all__ = [
    "__version__",
    "LogicNode",
    "LogicTree",
    "NodeMetadata",
    "NodeType",
]
