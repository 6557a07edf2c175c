"""
Evograph Network Module

This module implements the runtime graph built from a Genome: forward
activation, a local gradient descent training step, and the export of the
trained graph back to a Genome.

Classes:
    Network: A feedforward neural network built from a genome
"""

import copy
import logging
from collections import deque
from typing      import Iterable, Sequence
import graphviz  # type: ignore

from evograph.errors             import (CyclicGraphError, DanglingReferenceError,
                                         InvalidPatternError, InvalidTopologyError)
from evograph.genotype           import ConnectionGene, Genome, NodeGene, NodeType
from evograph.phenotype.connection import Connection
from evograph.phenotype.node       import Node
from evograph.run.config         import Config

logger = logging.getLogger(__name__)

class Network:
    """
    A feedforward neural network, built from a Genome.

    The network owns every Node and Connection. They are stored in two lists
    (an "arena"); connections refer to nodes, and nodes to connections, by their
    position in these lists. Nodes are additionally grouped by type, in the order
    their genes appear in the genome: the i-th value of an input pattern feeds the
    i-th input node and the i-th output value comes from the i-th output node.

    Disabled genes are not instantiated. They are kept verbatim ("junk genes")
    so that exporting the network back to a genome loses nothing.

    Forward pass:
        Each input node receives its pattern value. A node fires as soon as it
        has received a contribution from each of its incoming connections, which
        in turn delivers 'output * weight' to each successor. The cascade is
        depth-first and runs off an explicit stack, so deep networks do not hit
        the recursion limit. Non-input nodes without incoming connections fire at
        the start of every pass, with a net input of zero.

    Training step:
        A forward pass, followed by a backward pass started at the output nodes
        (squared error loss) that mirrors the forward synchronization: a node
        sends its error upstream once it has received a contribution from each
        of its outgoing connections. Pending adjustments are applied to all
        connections, then to all nodes, once the backward pass has completed.

    The graph must be a DAG; cycles are rejected at construction.

    Public Methods:
        activate(pattern):           Run a forward pass and return the output values
        train(example):              Run one gradient descent step on a training example
        mean_squared_error(examples): Evaluate the loss over a data set, without training
        to_genome():                 Export the network to a Genome
        export():                    Export the configuration and genome as a dictionary
        visualize(view):             Render the network with Graphviz

    Class Methods:
        from_genome(genome, config): Build a network from a genome
        from_export(record):         Build a network from an 'export()' record

    Public Properties:
        config:             The configuration of this network
        nodes:              Dictionary mapping node IDs to Nodes
        connections:        List of Connections, in creation order
        input_nodes:        List of input Nodes
        hidden_nodes:       List of hidden Nodes
        output_nodes:       List of output Nodes
        output:             Output values computed by the last forward pass
        number_nodes:       Number of instantiated nodes
        number_connections: Number of instantiated connections
    """

    def __init__(self, genome: Genome | None = None, config: Config | None = None):
        """
        Build the network.

        If no genome is supplied, one connecting every input node to every
        output node is generated from the configuration.

        Parameters:
            genome: the Genome encoding the network
            config: network and training parameters (defaults are used if None)

        Raises:
            DanglingReferenceError: a connection gene references a missing or disabled node
            UnknownSquashError:     a node gene names an unregistered squash function
            InvalidTopologyError:   a connection ends at an input node, or node ids are duplicated
            CyclicGraphError:       the enabled connections contain a cycle
        """
        config = copy.copy(config) if config is not None else Config()
        if genome is None:
            genome = Genome.fully_connected(config)

        nodes      : list[Node]           = []
        node_index : dict[int, int]       = {}   # node ID => position in "nodes"
        connections: list[Connection]     = []
        junk_nodes : list[NodeGene]       = []
        junk_conns : list[ConnectionGene] = []

        for gene in genome.nodes:
            if not gene.enabled:
                junk_nodes.append(copy.copy(gene))
                continue
            if gene.id in node_index:
                raise InvalidTopologyError(f"Duplicate node id {gene.id}")
            node_index[gene.id] = len(nodes)
            nodes.append(Node.from_gene(gene))

        for gene in genome.connections:
            if not gene.enabled:
                junk_conns.append(copy.copy(gene))
                continue
            for node_id in (gene.node_in, gene.node_out):
                if node_id not in node_index:
                    raise DanglingReferenceError(node_id, gene.innovation)

            if nodes[node_index[gene.node_out]].type == NodeType.INPUT:
                raise InvalidTopologyError(f"Connection gene {gene.innovation} ends at input node {gene.node_out}")

            from_index = node_index[gene.node_in]
            to_index   = node_index[gene.node_out]
            nodes[from_index].outgoing.append(len(connections))
            nodes[to_index].incoming.append(len(connections))
            connections.append(Connection.from_gene(gene, from_index, to_index))

        self._check_acyclic(nodes, connections)

        # Only now that the graph is known to be valid, take ownership of it
        self._config      = config
        self._nodes       = nodes
        self._node_index  = node_index
        self._connections = connections
        self._junk_nodes  = junk_nodes
        self._junk_conns  = junk_conns

        self._input_indices  = [i for i, node in enumerate(nodes) if node.type == NodeType.INPUT]
        self._hidden_indices = [i for i, node in enumerate(nodes) if node.type == NodeType.HIDDEN]
        self._output_indices = [i for i, node in enumerate(nodes) if node.type == NodeType.OUTPUT]

        # Nodes which would never be reached by the forward (backward) cascade
        self._forward_sources = [i for i, node in enumerate(nodes)
                                 if node.type != NodeType.INPUT and not node.incoming]
        self._backward_sources = [i for i, node in enumerate(nodes)
                                  if node.type == NodeType.HIDDEN and not node.outgoing]

        if self._config.num_inputs is None:
            self._config.num_inputs = len(self._input_indices)
        if self._config.num_outputs is None:
            self._config.num_outputs = len(self._output_indices)

        logger.debug("Built network: %d nodes (%d input, %d hidden, %d output), "
                     "%d connections, %d disabled node genes, %d disabled connection genes",
                     len(nodes), len(self._input_indices), len(self._hidden_indices),
                     len(self._output_indices), len(connections), len(junk_nodes), len(junk_conns))

    @classmethod
    def from_genome(cls, genome: Genome, config: Config | None = None) -> 'Network':
        return cls(genome, config)

    @classmethod
    def from_export(cls, record: dict) -> 'Network':
        """
        Build a network from a record produced by 'export'.

        Parameters:
            record: {"config": {...}, "genome": {"nodes": [...], "connections": [...]}}
        """
        return cls(Genome.from_dict(record["genome"]), Config.from_dict(record["config"]))

    @staticmethod
    def _check_acyclic(nodes: list[Node], connections: list[Connection]) -> None:
        """
        Verify, using Kahn's algorithm, that the connections form a DAG.

        Raises:
            CyclicGraphError: if some nodes can never be reached in topological order
        """
        in_degree = [len(node.incoming) for node in nodes]
        queue     = deque(i for i, degree in enumerate(in_degree) if degree == 0)
        visited   = 0

        while queue:
            index = queue.popleft()
            visited += 1
            for conn_index in nodes[index].outgoing:
                to_index = connections[conn_index].to_index
                in_degree[to_index] -= 1
                if in_degree[to_index] == 0:
                    queue.append(to_index)

        if visited < len(nodes):
            raise CyclicGraphError([nodes[i].id for i, degree in enumerate(in_degree) if degree > 0])

    @property
    def config(self) -> Config:
        return self._config

    @property
    def nodes(self) -> dict[int, Node]:
        """Dictionary mapping node IDs to Nodes."""
        return {node.id: node for node in self._nodes}

    @property
    def connections(self) -> list[Connection]:
        return list(self._connections)

    @property
    def input_nodes(self) -> list[Node]:
        return [self._nodes[i] for i in self._input_indices]

    @property
    def hidden_nodes(self) -> list[Node]:
        return [self._nodes[i] for i in self._hidden_indices]

    @property
    def output_nodes(self) -> list[Node]:
        return [self._nodes[i] for i in self._output_indices]

    @property
    def output(self) -> list[float]:
        """Output values computed by the last forward pass."""
        return [self._nodes[i].output for i in self._output_indices]

    @property
    def number_nodes(self) -> int:
        return len(self._nodes)

    @property
    def number_connections(self) -> int:
        return len(self._connections)

    def activate(self, pattern: Sequence[float]) -> list[float]:
        """
        Perform a complete forward pass through the network.

        Parameters:
            pattern: the network inputs (as many as input nodes)

        Returns:
            the output values (as many as output nodes)

        Raises:
            InvalidPatternError: if the pattern length differs from the number of input nodes
        """
        if len(pattern) != len(self._input_indices):
            raise InvalidPatternError(len(self._input_indices), len(pattern))

        # (node index, value) pairs still to be delivered; LIFO gives a depth-first cascade
        stack = [(index, 0.0) for index in reversed(self._forward_sources)]
        stack.extend((index, value) for index, value in zip(reversed(self._input_indices), reversed(pattern)))

        while stack:
            index, value = stack.pop()
            node = self._nodes[index]
            if not node.activate(value):
                continue
            for conn_index in reversed(node.outgoing):
                conn = self._connections[conn_index]
                stack.append((conn.to_index, node.output * conn.weight))

        return self.output

    def train(self, example: dict) -> list[float]:
        """
        Perform one gradient descent step on a single training example.

        Parameters:
            example: {"input": [...], "output": [...]}, with as many values
                     as input and output nodes respectively

        Returns:
            the output values computed by the forward pass, before the update

        Raises:
            InvalidPatternError: if the input or ideal output length is wrong
        """
        ideal = example["output"]
        if len(ideal) != len(self._output_indices):
            raise InvalidPatternError(len(self._output_indices), len(ideal), kind="output")

        outputs       = self.activate(example["input"])
        learning_rate = self._config.learning_rate

        # (node index, error signal) pairs still to be delivered
        stack = [(index, 0.0) for index in self._backward_sources]
        for index, target in zip(self._output_indices, ideal):
            signal_error = self._nodes[index].propagate_output(target, learning_rate)
            self._send_upstream(index, signal_error, stack)

        while stack:
            index, signal_error = stack.pop()
            node = self._nodes[index]

            # input nodes have no parameters, output nodes were handled above
            if node.type != NodeType.HIDDEN:
                continue

            signal_error = node.propagate_hidden(signal_error, learning_rate)
            if signal_error is not None:
                self._send_upstream(index, signal_error, stack)

        momentum = self._config.momentum
        for conn in self._connections:
            conn.adjust(momentum)
        for node in self._nodes:
            if node.type != NodeType.INPUT:
                node.adjust(momentum)

        return outputs

    def _send_upstream(self, index: int, signal_error: float, stack: list[tuple[int, float]]) -> None:
        """Set the pending adjustment of each incoming connection and queue the weighted error."""
        learning_rate = self._config.learning_rate
        for conn_index in self._nodes[index].incoming:
            conn   = self._connections[conn_index]
            source = self._nodes[conn.from_index]
            conn.adjustment = -learning_rate * signal_error * source.output
            stack.append((conn.from_index, signal_error * conn.weight))

    def mean_squared_error(self, examples: Iterable[dict]) -> float:
        """
        Mean (over examples and outputs) of the squared error, without training.

        Parameters:
            examples: training examples, as accepted by 'train'
        """
        total, count = 0.0, 0
        for example in examples:
            outputs = self.activate(example["input"])
            for value, target in zip(outputs, example["output"]):
                total += (value - target) ** 2
                count += 1
        if count == 0:
            raise ValueError("Cannot compute the error of an empty data set")
        return total / count

    def to_genome(self) -> Genome:
        """
        Export the network to a Genome.

        Live nodes and connections become enabled genes holding their current
        bias/weight, in creation order; the disabled genes the network was built
        with follow, unchanged.
        """
        genome = Genome()
        for node in self._nodes:
            genome.add_node(node)
        for gene in self._junk_nodes:
            genome.add_node_gene(gene.id, gene.type, gene.bias, gene.squash, False)

        for conn in self._connections:
            genome.add_connection(conn)
        for gene in self._junk_conns:
            genome.add_connection_gene(gene.node_in, gene.node_out, gene.weight, gene.innovation, False)
        return genome

    def export(self) -> dict:
        """
        Export the network as a JSON-compatible dictionary.

        Returns:
            {"config": {...}, "genome": {"nodes": [...], "connections": [...]}}
        """
        return {"config": self._config.to_dict(),
                "genome": self.to_genome().to_dict()}

    def visualize(self, view: bool = False) -> graphviz.Digraph:
        """
        Visualize the network using Graphviz.
        Disabled genes are drawn in light gray.

        Parameters:
            view: If True, automatically open the visualization after rendering

        Returns:
            graphviz.Digraph object representing the network
        """
        dot = graphviz.Digraph()
        dot.attr(rankdir='LR')  # Left to right layout

        base_attrs = {'style': 'filled', 'shape': 'circle', 'penwidth': '0.5', 'fontsize': '5',
                      'width': '0.5', 'height': '0.5', 'fixedsize': 'true'}
        fill_colors = {NodeType.INPUT: 'lightgrey', NodeType.HIDDEN: 'lightblue', NodeType.OUTPUT: 'white'}

        clusters = [('cluster_input' , 'source', NodeType.INPUT),
                    ('cluster_hidden', 'same'  , NodeType.HIDDEN),
                    ('cluster_output', 'sink'  , NodeType.OUTPUT)]
        for name, rank, node_type in clusters:
            with dot.subgraph(name=name) as cluster:
                cluster.attr(rank=rank, style='invisible')
                for node in self._nodes:
                    if node.type == node_type:
                        label = f"id={node.id}\\nbias={node.bias:.2f}\\n{node.squash.name}"
                        cluster.node(str(node.id), label=label, fillcolor=fill_colors[node_type],
                                     color='black', **base_attrs)
                for gene in self._junk_nodes:
                    if gene.type == node_type:
                        cluster.node(str(gene.id), label=f"id={gene.id}", fillcolor='white',
                                     color='lightgray', **base_attrs)

        edge_attrs = {'fontsize': '5', 'penwidth': '0.5', 'arrowsize': '0.5'}
        for conn in self._connections:
            dot.edge(str(conn.node_in), str(conn.node_out), color='black',
                     label=f"i={conn.innovation},w={conn.weight:.2f}", **edge_attrs)
        for gene in self._junk_conns:
            dot.edge(str(gene.node_in), str(gene.node_out), color='lightgray',
                     label=f"i={gene.innovation},w={gene.weight:.2f}", **edge_attrs)

        if view:
            dot.view(cleanup=True)

        return dot

    def __str__(self):
        nodes_str       = "\n".join(f"  {node}" for node in self._nodes)
        connections_str = "\n".join(f"  {conn}" for conn in self._connections)
        return f"{nodes_str}\n\n{connections_str}"
