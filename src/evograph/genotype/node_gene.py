"""
Evograph Node Gene Module.

This module implements the NodeGene class and NodeType enumeration.

Classes:
    NodeType: Enumeration for node types (INPUT, HIDDEN, OUTPUT)
    NodeGene: Gene encoding a single network node
"""

from enum import Enum

from evograph.activations import squash_codes

class NodeType(Enum):
    """
    Nodes come in three types: input, hidden, output.
    The enumeration value is the name used in serialized genomes.
    """
    INPUT  = "input"
    HIDDEN = "hidden"
    OUTPUT = "output"

class NodeGene:
    """
    A gene describing a node in a Neural Network.

    A node gene is a plain data record: it holds the node's identity, its type,
    its bias and the name of its squash function. Disabled node genes are kept
    in the genome (rather than deleted), so that a genome can be round-tripped
    through a network without losing genes that evolution has switched off.

    Public Attributes:
        id:      Identifier for this node, unique within a genome
        type:    Type of node (INPUT, HIDDEN, or OUTPUT)
        bias:    Bias value added to the node's net input
        squash:  Name of the squash function (e.g., 'sigmoid', 'identity')
        enabled: Whether this node is instantiated when building a network

    Public Methods:
        to_dict(): Convert the gene to its serialized (JSON-compatible) form

    Class Methods:
        from_dict(gene_dict): Create a gene from its serialized form
    """

    def __init__(self,
                 node_id  : int,
                 node_type: NodeType,
                 bias     : float = 0.0,
                 squash   : str   = "sigmoid",
                 enabled  : bool  = True):
        """
        Initialize a node gene.

        Parameters:
            node_id:   Identifier for this node, unique within a genome
            node_type: Type of node (INPUT, HIDDEN, or OUTPUT); strings are accepted
            bias:      Bias value added to the node's net input
            squash:    Name of the squash function
            enabled:   Whether this node is instantiated when building a network
        """
        self.id     : int      = node_id
        self.type   : NodeType = NodeType(node_type)
        self.bias   : float    = bias
        self.squash : str      = squash
        self.enabled: bool     = enabled

    def to_dict(self) -> dict:
        return {"id"     : self.id,
                "type"   : self.type.value,
                "bias"   : float(self.bias),
                "squash" : self.squash,
                "enabled": self.enabled}

    @classmethod
    def from_dict(cls, gene_dict: dict) -> 'NodeGene':
        return cls(gene_dict["id"],
                   NodeType(gene_dict["type"]),
                   gene_dict.get("bias", 0.0),
                   gene_dict.get("squash", "sigmoid"),
                   gene_dict.get("enabled", True))

    def __eq__(self, other):
        if not isinstance(other, NodeGene):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __repr__(self):
        return (f"NodeGene(node_id={self.id:+03d}, node_type=NodeType.{self.type.name:6s},"
                f"bias={self.bias}, squash='{self.squash}', enabled={self.enabled})")

    def __str__(self):
        flag = "" if self.enabled else ",D"
        if self.type == NodeType.INPUT:
            return f"[{self.type.name[0]}{self.id}{flag}]"
        squash_code = squash_codes.get(self.squash, "???")
        return f"[{self.type.name[0]}{self.id},{squash_code},b={self.bias:.2f}{flag}]"
