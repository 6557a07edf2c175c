"""
Evograph Phenotype Package

This package implements the runtime representation of a genome: a graph of
nodes and connections that can be activated and trained, and exported back
to a genome.

Modules:
    node:       Node class (per-node activation and error propagation protocol)
    connection: Connection class (weighted edge with pending adjustment)
    network:    Network class (graph construction, forward pass, training, export)

Exported Classes:
    Connection: A weighted edge between two nodes
    Node:       A computational unit applying a squash function
    Network:    A feedforward neural network built from a genome
"""

from evograph.phenotype.connection import Connection
from evograph.phenotype.node       import Node
from evograph.phenotype.network    import Network

__all__ = ['Connection',
           'Node',
           'Network']
