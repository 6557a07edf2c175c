"""
Evograph - an evolvable neural network engine.

This package represents a feedforward neural network as a serializable set of
genes (NEAT style), builds a runtime graph from it, runs forward activation and
a local gradient descent training step over that graph, and exports the trained
graph back to genes.

Main components:
- genotype:    Genetic encoding (node genes, connection genes, genomes)
- phenotype:   Runtime graph (nodes, connections, network)
- activations: Squash functions and their derivatives
- run:         Configuration and training loop
- errors:      Exceptions raised by network construction and activation

Example:
    >>> from evograph import Config, Network
    >>> config = Config()
    >>> config.num_inputs, config.num_outputs = 2, 1
    >>> network = Network(config=config)
    >>> network.train({"input": [0, 1], "output": [1]})
    >>> record = network.export()
"""

__version__ = "0.1.0"

from evograph.errors import (
    EvographError,
    InvalidPatternError,
    DanglingReferenceError,
    UnknownSquashError,
    InvalidTopologyError,
    CyclicGraphError,
)
from evograph.run.config import Config
from evograph.run.trainer import Trainer
from evograph.genotype import Genome, NodeGene, ConnectionGene, NodeType
from evograph.phenotype import Network, Node, Connection

__all__ = [
    "Config",
    "Trainer",
    "Genome",
    "NodeGene",
    "ConnectionGene",
    "NodeType",
    "Network",
    "Node",
    "Connection",
    "EvographError",
    "InvalidPatternError",
    "DanglingReferenceError",
    "UnknownSquashError",
    "InvalidTopologyError",
    "CyclicGraphError",
]
