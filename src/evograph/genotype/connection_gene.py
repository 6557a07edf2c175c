"""
Evograph Connection Gene Module

This module implements the ConnectionGene class.

Classes:
    ConnectionGene: Gene encoding a weighted connection between nodes
"""

class ConnectionGene:
    """
    A gene describing a weighted connection between two nodes in a Neural Network.

    Each connection gene represents a directed edge in the network graph, from a
    source node to a destination node, with an associated weight. Connection genes
    carry an innovation number: an opaque marker which evolutionary operators use
    to align genes across genomes. It is never interpreted here, only preserved.

    Connections can be enabled or disabled. Disabled connections are not
    instantiated in a network, but survive a genome => network => genome round trip.

    Public Attributes:
        node_in:    ID of the source node
        node_out:   ID of the destination node
        weight:     Weight of the connection
        innovation: Global innovation number identifying this connection
        enabled:    Whether this connection is active in the network
    """

    def __init__(self,
                 node_in   : int,
                 node_out  : int,
                 weight    : float,
                 innovation: int,
                 enabled   : bool = True):
        """
        Initialize a connection gene.

        Parameters:
            node_in:    ID of the source node
            node_out:   ID of the destination node
            weight:     Weight of the connection
            innovation: Number uniquely and globally identifying this connection
            enabled:    Whether this connection is active in the network
        """
        self.node_in   : int   = node_in
        self.node_out  : int   = node_out
        self.weight    : float = weight
        self.innovation: int   = innovation
        self.enabled   : bool  = enabled

    def to_dict(self) -> dict:
        # 'from' and 'to' are the serialized field names
        return {"from"      : self.node_in,
                "to"        : self.node_out,
                "weight"    : float(self.weight),
                "innovation": self.innovation,
                "enabled"   : self.enabled}

    @classmethod
    def from_dict(cls, gene_dict: dict) -> 'ConnectionGene':
        return cls(gene_dict["from"],
                   gene_dict["to"],
                   gene_dict["weight"],
                   gene_dict["innovation"],
                   gene_dict.get("enabled", True))

    def __eq__(self, other):
        if not isinstance(other, ConnectionGene):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __repr__(self):
        return (f"ConnectionGene(node_in={self.node_in:03d}, node_out={self.node_out:03d},"
                f"weight={self.weight:+.6f}, innovation={self.innovation:03d}, enabled={self.enabled})")

    def __str__(self):
        s  = f"[{self.innovation:03d},{'E' if self.enabled else 'D'},"
        s += f"{self.node_in:02d}=>{self.node_out:02d},{self.weight:+.02f}]"
        return s
