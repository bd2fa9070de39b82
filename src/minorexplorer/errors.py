"""
Error Types
===========
Exceptions raised by graph edits and the exploration tree.

A failed edit never leaves a partially modified graph or tree behind, so
callers can catch ``GraphError`` at the UI boundary and carry on.
"""


class GraphError(Exception):
    """Base class for all graph and tree edit failures."""


class IndexOutOfRangeError(GraphError, IndexError):
    """A positional index (or slot) does not address an existing position."""


class NodeNotFoundError(GraphError, LookupError):
    """No node with the requested identity exists in the graph."""


class InvalidTreeTransitionError(GraphError, ValueError):
    """A push would skip a generation of the exploration tree."""
