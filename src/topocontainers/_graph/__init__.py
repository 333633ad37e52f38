"""Graph module providing the precedence graph and its linearizer.

This module contains:
- PrecedenceGraph[K]: A mutable set of "v before w" constraints
- linearize: Depth-first post-order linearization into a LIFO stack
- find_cycle: Cycle search used by strict linearization
- drain: Consume a stack top-first
"""

from ._algorithms import CycleError, drain, find_cycle, linearize
from ._precedence_graph import PrecedenceGraph

__all__ = ["CycleError", "PrecedenceGraph", "drain", "find_cycle", "linearize"]
