"""
Evograph Genotype Package

This package implements the genotype representation of an evograph network:
the durable gene lists from which runtime networks are built, and to which
trained networks are exported.

The genotype consists of two types of genes:
- Node genes:       Encode individual nodes with their bias and squash function
- Connection genes: Encode weighted connections between nodes with innovation numbers

Modules:
    node_gene:       NodeType enumeration and NodeGene class
    connection_gene: ConnectionGene class
    genome:          Genome class

Exported Classes:
    NodeType:       Enumeration for node types (INPUT, HIDDEN, OUTPUT)
    NodeGene:       Gene encoding a single network node
    ConnectionGene: Gene encoding a weighted connection between nodes
    Genome:         Ordered collection of node and connection genes
"""

from evograph.genotype.connection_gene import ConnectionGene
from evograph.genotype.genome          import Genome
from evograph.genotype.node_gene       import NodeType, NodeGene

__all__ = ['ConnectionGene',
           'Genome',
           'NodeGene',
           'NodeType']
