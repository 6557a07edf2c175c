"""
Evograph Errors Module

This module defines the exceptions raised when a network cannot be built
from a genome, or when a network is called with malformed data.

Classes:
    EvographError:          Base class for all errors raised by this package
    InvalidPatternError:    Input (or ideal output) vector has the wrong length
    DanglingReferenceError: A connection gene references a node that was not instantiated
    UnknownSquashError:     A squash (activation) function name is not registered
    InvalidTopologyError:   The enabled genes do not describe a feedforward network
    CyclicGraphError:       The enabled connections do not form a DAG
"""

class EvographError(Exception):
    """Base class for all errors raised by evograph."""

class InvalidPatternError(EvographError, ValueError):
    """A pattern does not have one value per input (or output) node."""

    def __init__(self, expected: int, received: int, kind: str = "input"):
        self.expected = expected
        self.received = received
        super().__init__(f"Invalid {kind} pattern: expected {expected} values, got {received}")

class DanglingReferenceError(EvographError, LookupError):
    """A connection gene points at a node id absent from the instantiated node map."""

    def __init__(self, node_id: int, innovation: int):
        self.node_id    = node_id
        self.innovation = innovation
        super().__init__(f"Connection gene {innovation} references node {node_id}, "
                         f"which is missing or disabled")

class UnknownSquashError(EvographError, LookupError):
    """A squash function name is not registered in the squash table."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown squash function '{name}'")

class InvalidTopologyError(EvographError, ValueError):
    """The enabled genes cannot be run as a feedforward network."""

class CyclicGraphError(InvalidTopologyError):
    """The enabled connections of a genome contain a cycle."""

    def __init__(self, node_ids: list[int]):
        self.node_ids = node_ids
        super().__init__(f"Network is not acyclic, nodes on a cycle: {sorted(node_ids)}")
