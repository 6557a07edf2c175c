"""Pytest configuration and shared fixtures."""

import pytest
import sys
from pathlib import Path

# Add the source directory to the Python path
src_dir = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_dir))


@pytest.fixture
def two_input_genome():
    """
    Two inputs feeding one identity output:
        0 --( 0.5)--> 2
        1 --(-0.5)--> 2
    """
    from evograph.genotype import Genome, NodeType

    genome = Genome()
    genome.add_node_gene(0, NodeType.INPUT, 0.0, "identity")
    genome.add_node_gene(1, NodeType.INPUT, 0.0, "identity")
    genome.add_node_gene(2, NodeType.OUTPUT, 0.0, "identity")
    genome.add_connection_gene(0, 2, 0.5, 0)
    genome.add_connection_gene(1, 2, -0.5, 1)
    return genome


@pytest.fixture
def plain_config():
    """Config for exact-arithmetic tests: no momentum, round learning rate."""
    from evograph.run.config import Config

    config = Config()
    config.learning_rate = 0.1
    config.momentum      = 0.0
    return config
