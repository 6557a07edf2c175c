"""
Unit tests for Genome class.

Tests cover gene accumulation, copying genes from runtime objects,
serialization, and the fully connected genome generator.
"""

import numpy as np
import pytest
from evograph.genotype  import ConnectionGene, Genome, NodeGene, NodeType
from evograph.phenotype import Connection, Node
from evograph.run.config import Config


# ============================================================================
# Test Fixtures
# ============================================================================

@pytest.fixture
def generator_config():
    config = Config()
    config.num_inputs  = 3
    config.num_outputs = 2
    config.seed        = 7
    return config


@pytest.fixture
def genome_dict():
    return {
        'nodes': [
            {'id': 0, 'type': 'input',  'bias': 0.0, 'squash': 'identity', 'enabled': True},
            {'id': 1, 'type': 'output', 'bias': 0.1, 'squash': 'sigmoid',  'enabled': True},
            {'id': 2, 'type': 'hidden', 'bias': 0.2, 'squash': 'tanh',     'enabled': False},
        ],
        'connections': [
            {'from': 0, 'to': 1, 'weight':  0.5, 'innovation': 0, 'enabled': True},
            {'from': 0, 'to': 2, 'weight': -0.5, 'innovation': 1, 'enabled': False},
        ]
    }


# ============================================================================
# Test: Gene accumulation
# ============================================================================

class TestGenomeAccumulation:
    """Test appending genes."""

    def test_new_genome_is_empty(self):
        genome = Genome()
        assert genome.nodes == []
        assert genome.connections == []

    def test_add_node_gene_appends_in_order(self):
        genome = Genome()
        genome.add_node_gene(5, NodeType.OUTPUT, 0.5)
        genome.add_node_gene(1, NodeType.INPUT, 0.0, "identity")

        assert [gene.id for gene in genome.nodes] == [5, 1]
        assert genome.nodes[0].squash == "sigmoid"
        assert genome.nodes[1].squash == "identity"

    def test_add_node_gene_returns_gene(self):
        gene = Genome().add_node_gene(0, NodeType.INPUT, 0.0)
        assert isinstance(gene, NodeGene)

    def test_add_connection_gene_appends_in_order(self):
        genome = Genome()
        genome.add_connection_gene(0, 2, 0.5, 3)
        genome.add_connection_gene(1, 2, 0.25, 1, enabled=False)

        assert [gene.innovation for gene in genome.connections] == [3, 1]
        assert genome.connections[1].enabled is False

    def test_no_validation_of_references(self):
        """Dangling references are only detected when building a network."""
        genome = Genome()
        genome.add_connection_gene(10, 20, 1.0, 0)
        assert len(genome.connections) == 1

    def test_add_node_copies_runtime_node(self):
        node = Node(4, NodeType.HIDDEN, 0.75, "relu")
        genome = Genome()
        gene = genome.add_node(node)

        assert gene.to_dict() == {"id": 4, "type": "hidden", "bias": 0.75,
                                  "squash": "relu", "enabled": True}

    def test_add_node_is_a_copy(self):
        node = Node(4, NodeType.HIDDEN, 0.75, "relu")
        genome = Genome()
        gene = genome.add_node(node)
        node.bias = 2.0
        assert gene.bias == 0.75

    def test_add_connection_copies_runtime_connection(self):
        conn = Connection(from_index=0, to_index=1, node_in=3, node_out=8, weight=-1.5, innovation=12)
        genome = Genome()
        gene = genome.add_connection(conn)

        assert gene.to_dict() == {"from": 3, "to": 8, "weight": -1.5,
                                  "innovation": 12, "enabled": True}

    def test_type_views(self, genome_dict):
        genome = Genome.from_dict(genome_dict)
        assert [gene.id for gene in genome.input_nodes]  == [0]
        assert [gene.id for gene in genome.output_nodes] == [1]
        assert [gene.id for gene in genome.hidden_nodes] == [2]


# ============================================================================
# Test: Serialization
# ============================================================================

class TestGenomeSerialization:
    """Test to_dict / from_dict."""

    def test_from_dict(self, genome_dict):
        genome = Genome.from_dict(genome_dict)

        assert len(genome.nodes) == 3
        assert len(genome.connections) == 2
        assert genome.nodes[2].enabled is False
        assert genome.connections[1].innovation == 1

    def test_to_dict_inverts_from_dict(self, genome_dict):
        assert Genome.from_dict(genome_dict).to_dict() == genome_dict

    def test_to_dict_is_json_serializable(self, genome_dict):
        import json
        genome = Genome.from_dict(genome_dict)
        assert json.loads(json.dumps(genome.to_dict())) == genome_dict

    def test_from_empty_dict(self):
        genome = Genome.from_dict({})
        assert genome.nodes == []
        assert genome.connections == []

    def test_str_lists_genes(self, genome_dict):
        genome_str = str(Genome.from_dict(genome_dict))
        assert "[I0]" in genome_str
        assert "[001,D,00=>02,-0.50]" in genome_str


# ============================================================================
# Test: Fully connected generator
# ============================================================================

class TestFullyConnected:
    """Test the default genome generator."""

    def test_node_numbering(self, generator_config):
        genome = Genome.fully_connected(generator_config)

        assert [gene.id for gene in genome.input_nodes]  == [0, 1, 2]
        assert [gene.id for gene in genome.output_nodes] == [3, 4]
        assert genome.hidden_nodes == []

    def test_full_bipartite_connectivity(self, generator_config):
        genome = Genome.fully_connected(generator_config)
        pairs = [(gene.node_in, gene.node_out) for gene in genome.connections]

        assert pairs == [(0, 3), (0, 4), (1, 3), (1, 4), (2, 3), (2, 4)]

    def test_innovations_ascending_from_zero(self, generator_config):
        genome = Genome.fully_connected(generator_config)
        assert [gene.innovation for gene in genome.connections] == list(range(6))

    def test_all_genes_enabled(self, generator_config):
        genome = Genome.fully_connected(generator_config)
        assert all(gene.enabled for gene in genome.nodes)
        assert all(gene.enabled for gene in genome.connections)

    def test_uses_config_squash(self, generator_config):
        generator_config.squash = "tanh"
        genome = Genome.fully_connected(generator_config)
        assert {gene.squash for gene in genome.nodes} == {"tanh"}

    def test_same_seed_same_genome(self, generator_config):
        genome1 = Genome.fully_connected(generator_config)
        genome2 = Genome.fully_connected(generator_config)
        assert genome1.to_dict() == genome2.to_dict()

    def test_different_seed_different_weights(self, generator_config):
        genome1 = Genome.fully_connected(generator_config)
        generator_config.seed = 8
        genome2 = Genome.fully_connected(generator_config)
        assert genome1.to_dict() != genome2.to_dict()

    def test_explicit_generator(self, generator_config):
        genome1 = Genome.fully_connected(generator_config, rng=np.random.default_rng(1))
        genome2 = Genome.fully_connected(generator_config, rng=np.random.default_rng(1))
        assert genome1.to_dict() == genome2.to_dict()

    def test_weights_follow_config_distribution(self, generator_config):
        generator_config.weight_init_mean  = 5.0
        generator_config.weight_init_stdev = 0.0
        generator_config.bias_init_mean    = -2.0
        generator_config.bias_init_stdev   = 0.0
        genome = Genome.fully_connected(generator_config)

        assert all(gene.weight == 5.0 for gene in genome.connections)
        assert all(gene.bias == -2.0 for gene in genome.nodes)

    def test_missing_counts_raise(self):
        with pytest.raises(ValueError, match="num_inputs"):
            Genome.fully_connected(Config())

    def test_weights_are_python_floats(self, generator_config):
        genome = Genome.fully_connected(generator_config)
        assert all(type(gene.weight) is float for gene in genome.connections)
