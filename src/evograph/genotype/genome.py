"""
Evograph Genome Module

This module implements the Genome class: the durable, serializable
representation of a network as ordered lists of node and connection genes.

Classes:
    Genome: Ordered collection of node genes and connection genes
"""

import numpy as np
from typing import TYPE_CHECKING

from evograph.genotype.connection_gene import ConnectionGene
from evograph.genotype.node_gene       import NodeType, NodeGene

if TYPE_CHECKING:
    from evograph.phenotype import Connection, Node
    from evograph.run.config import Config

class Genome:
    """
    A genome describing a neural network as a collection of node and connection genes.

    The genome is a pure data container: genes are appended in order and never
    validated here. Referential integrity (every connection gene's endpoints name
    a node gene of the same genome, no two node genes share an id) is the
    responsibility of whoever builds the genome; violations surface when a
    Network is built from it.

    Attributes:
        nodes:       List of NodeGene objects, in insertion order
        connections: List of ConnectionGene objects, in insertion order

    Public Methods:
        add_node_gene(...):       Append a node gene built from its fields
        add_connection_gene(...): Append a connection gene built from its fields
        add_node(node):           Append a node gene copied from a runtime Node
        add_connection(conn):     Append a connection gene copied from a runtime Connection
        to_dict():                Convert genome to dictionary representation

    Class Methods:
        from_dict(genome_dict):     Create a genome from a dictionary description
        fully_connected(config):    Create a genome connecting every input to every output
    """

    def __init__(self):
        self.nodes      : list[NodeGene]       = []
        self.connections: list[ConnectionGene] = []

    def add_node_gene(self,
                      node_id  : int,
                      node_type: NodeType,
                      bias     : float,
                      squash   : str  = "sigmoid",
                      enabled  : bool = True) -> NodeGene:
        gene = NodeGene(node_id, node_type, bias, squash, enabled)
        self.nodes.append(gene)
        return gene

    def add_connection_gene(self,
                            node_in   : int,
                            node_out  : int,
                            weight    : float,
                            innovation: int,
                            enabled   : bool = True) -> ConnectionGene:
        gene = ConnectionGene(node_in, node_out, weight, innovation, enabled)
        self.connections.append(gene)
        return gene

    def add_node(self, node: 'Node') -> NodeGene:
        """
        Append an enabled node gene holding the current state of a runtime node.

        Parameters:
            node: the runtime Node to copy id, type, bias and squash name from
        """
        return self.add_node_gene(node.id, node.type, node.bias, node.squash.name, True)

    def add_connection(self, connection: 'Connection') -> ConnectionGene:
        """
        Append an enabled connection gene holding the current state of a runtime connection.

        Parameters:
            connection: the runtime Connection to copy endpoints, weight and innovation from
        """
        return self.add_connection_gene(connection.node_in,
                                        connection.node_out,
                                        connection.weight,
                                        connection.innovation,
                                        True)

    @property
    def input_nodes(self) -> list[NodeGene]:
        """List of all input node genes (enabled or not)."""
        return [gene for gene in self.nodes if gene.type == NodeType.INPUT]

    @property
    def output_nodes(self) -> list[NodeGene]:
        """List of all output node genes (enabled or not)."""
        return [gene for gene in self.nodes if gene.type == NodeType.OUTPUT]

    @property
    def hidden_nodes(self) -> list[NodeGene]:
        """List of all hidden node genes (enabled or not)."""
        return [gene for gene in self.nodes if gene.type == NodeType.HIDDEN]

    def to_dict(self) -> dict:
        """
        Convert the genome to a JSON-compatible dictionary.

        Returns:
            {"nodes": [node gene dicts], "connections": [connection gene dicts]}
        """
        return {"nodes"      : [gene.to_dict() for gene in self.nodes],
                "connections": [gene.to_dict() for gene in self.connections]}

    @classmethod
    def from_dict(cls, genome_dict: dict) -> 'Genome':
        """
        Create a Genome from a dictionary description.

        Dictionary format:
            {
                "nodes": [
                    {"id": 0, "type": "input",  "bias": 0.0, "squash": "identity", "enabled": true},
                    {"id": 1, "type": "output", "bias": 0.1, "squash": "sigmoid",  "enabled": true}
                ],
                "connections": [
                    {"from": 0, "to": 1, "weight": 0.5, "innovation": 0, "enabled": true}
                ]
            }

        Parameters:
            genome_dict: Dictionary with "nodes" and "connections" lists

        Returns:
            a new Genome holding the described genes, in the given order
        """
        genome = cls()
        for gene_dict in genome_dict.get("nodes", []):
            genome.nodes.append(NodeGene.from_dict(gene_dict))
        for gene_dict in genome_dict.get("connections", []):
            genome.connections.append(ConnectionGene.from_dict(gene_dict))
        return genome

    @classmethod
    def fully_connected(cls,
                        config: 'Config',
                        rng   : np.random.Generator | None = None) -> 'Genome':
        """
        Create a genome with every input node connected to every output node.

        Node numbering convention:
            - Input nodes:  [0, num_inputs)
            - Output nodes: [num_inputs, num_inputs + num_outputs)

        Connections are created input-major, with innovation numbers 0, 1, 2, ...
        Weights and biases are drawn from normal distributions whose parameters
        are read from the configuration.

        Parameters:
            config: Stores configuration parameters (num_inputs, num_outputs, squash, init params)
            rng:    Random generator; if None, one is seeded from 'config.seed'

        Returns:
            the generated Genome
        """
        if config.num_inputs is None or config.num_outputs is None:
            raise ValueError("Config must define 'num_inputs' and 'num_outputs' to generate a genome")

        if rng is None:
            rng = np.random.default_rng(config.seed)

        genome = cls()
        for node_id in range(config.num_inputs):
            bias = rng.normal(config.bias_init_mean, config.bias_init_stdev)
            genome.add_node_gene(node_id, NodeType.INPUT, float(bias), config.squash)

        for node_id in range(config.num_inputs, config.num_inputs + config.num_outputs):
            bias = rng.normal(config.bias_init_mean, config.bias_init_stdev)
            genome.add_node_gene(node_id, NodeType.OUTPUT, float(bias), config.squash)

        innovation = 0
        for input_gene in genome.input_nodes:
            for output_gene in genome.output_nodes:
                weight = rng.normal(config.weight_init_mean, config.weight_init_stdev)
                genome.add_connection_gene(input_gene.id, output_gene.id, float(weight), innovation)
                innovation += 1

        return genome

    def __repr__(self):
        return f"Genome(nodes={self.nodes!r}, connections={self.connections!r})"

    def __str__(self):
        node_str = " ".join(str(gene) for gene in self.nodes)
        conn_str = " ".join(str(gene) for gene in self.connections)
        return f"{node_str}\n{conn_str}"
