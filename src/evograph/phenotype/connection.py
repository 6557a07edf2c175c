"""
Evograph Connection Module

This module implements the runtime representation of a connection gene.

Classes:
    Connection: A weighted edge between two nodes of a Network
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from evograph.genotype import ConnectionGene

class Connection:
    """
    A weighted connection between two nodes in a running network.

    The Network owns all of its connections and nodes, storing them in lists
    (its "arena"). A connection refers to its endpoints by their position in the
    Network's node list ('from_index', 'to_index'); it also remembers the node
    ids, so it can be written back to a genome.

    During training the connection accumulates a pending weight adjustment,
    which is only applied by 'adjust', once the backward pass has completed.

    Public Attributes:
        from_index: Position of the source node in the Network's node list
        to_index:   Position of the destination node in the Network's node list
        node_in:    ID of the source node
        node_out:   ID of the destination node
        weight:     Weight multiplier applied to the transmitted signal
        innovation: Innovation number copied from the gene, never modified
        adjustment: Pending weight change computed by the backward pass
        delta:      Last weight change applied (used for momentum)

    Public Methods:
        adjust(momentum): Apply the pending adjustment to the weight
    """

    def __init__(self,
                 from_index: int,
                 to_index  : int,
                 node_in   : int,
                 node_out  : int,
                 weight    : float,
                 innovation: int):
        self.from_index: int   = from_index
        self.to_index  : int   = to_index
        self.node_in   : int   = node_in
        self.node_out  : int   = node_out
        self.weight    : float = weight
        self.innovation: int   = innovation
        self.adjustment: float = 0.0
        self.delta     : float = 0.0

    @classmethod
    def from_gene(cls, gene: "ConnectionGene", from_index: int, to_index: int) -> "Connection":
        return cls(from_index, to_index, gene.node_in, gene.node_out, gene.weight, gene.innovation)

    def adjust(self, momentum: float = 0.0) -> None:
        """
        Apply the pending adjustment (plus momentum) to the weight,
        then clear the pending adjustment.

        Parameters:
            momentum: fraction of the previously applied change to add
        """
        step = self.adjustment + momentum * self.delta
        self.weight    += step
        self.delta      = step
        self.adjustment = 0.0

    def __repr__(self):
        return (f"Connection(node_in={self.node_in}, node_out={self.node_out}, "
                f"weight={self.weight}, innovation={self.innovation})")

    def __str__(self):
        return f"[{self.innovation:03d},{self.node_in:02d}=>{self.node_out:02d},{self.weight:+.02f}]"
