"""
XOR Problem Trained by Gradient Descent

XOR is a two-input, one-output boolean function whose output is 1 only when
the inputs differ. It is not linearly separable, so the network needs hidden
nodes: this example builds a 2-3-1 genome by hand, trains it with the Trainer
and returns the trained network.

    Input (0, 0) → Output 0
    Input (0, 1) → Output 1
    Input (1, 0) → Output 1
    Input (1, 1) → Output 0
"""

import numpy as np

from evograph.genotype  import Genome, NodeType
from evograph.phenotype import Network
from evograph.run       import Config, Trainer

XOR_EXAMPLES = [{"input": [0.0, 0.0], "output": [0.0]},
                {"input": [0.0, 1.0], "output": [1.0]},
                {"input": [1.0, 0.0], "output": [1.0]},
                {"input": [1.0, 1.0], "output": [0.0]}]

def xor_genome(config: Config, num_hidden: int = 3) -> Genome:
    """
    Build a genome with one fully connected hidden layer.

    Node numbering: inputs [0, 2), output 2, hidden [3, 3 + num_hidden).
    """
    rng = np.random.default_rng(config.seed)
    genome = Genome()
    genome.add_node_gene(0, NodeType.INPUT, 0.0, "identity")
    genome.add_node_gene(1, NodeType.INPUT, 0.0, "identity")
    genome.add_node_gene(2, NodeType.OUTPUT, float(rng.normal()), config.squash)

    hidden_ids = list(range(3, 3 + num_hidden))
    for node_id in hidden_ids:
        genome.add_node_gene(node_id, NodeType.HIDDEN, float(rng.normal()), config.squash)

    innovation = 0
    for node_in in (0, 1):
        for node_out in hidden_ids:
            genome.add_connection_gene(node_in, node_out, float(rng.normal()), innovation)
            innovation += 1
    for node_in in hidden_ids:
        genome.add_connection_gene(node_in, 2, float(rng.normal()), innovation)
        innovation += 1
    return genome

def run(config: Config, suppress_output: bool = False) -> Network:
    network = Network(xor_genome(config), config)
    trainer = Trainer(network, suppress_output=suppress_output)
    trainer.run(XOR_EXAMPLES)
    return network
