"""
Evograph Node Module

This module implements the runtime representation of a node gene, and the
per-node half of the activation and error propagation protocols.

Classes:
    Node: A computational unit of a Network
"""

from typing import TYPE_CHECKING

from evograph.activations    import Squash, get_squash
from evograph.genotype       import NodeType

if TYPE_CHECKING:
    from evograph.genotype import NodeGene

class Node:
    """
    A computational node in a running network.

    A node only knows about its own state; it is the Network that routes
    values along connections. What the node contributes is the synchronization
    logic: it counts the contributions it receives and only "fires" once it
    has heard from every incoming connection (forward pass), or from every
    outgoing connection (backward pass).

    Forward pass:
        'activate(value)' accumulates 'value' into the net input. The first
        contribution of a pass replaces whatever was left from the previous pass.
        Once the number of contributions reaches the number of incoming
        connections the node fires: it adds its bias and squashes the net input
        into its output (input nodes do neither: their output is their net input).

    Backward pass:
        'propagate_output(ideal, learning_rate)' starts the error signal at an
        output node. 'propagate_hidden(signal_error, learning_rate)' accumulates
        error contributions at any other node until one has been received per
        outgoing connection. Both compute the node's pending bias adjustment and
        return the error signal to send upstream.

    Public Attributes:
        id:               ID of the gene this node was built from
        type:             Node type (INPUT, HIDDEN, or OUTPUT)
        bias:             Bias added to the net input before squashing
        squash:           Squash entry (function and derivative)
        net_input:        Net input accumulated during the current/last forward pass
        output:           Output computed during the last forward pass
        incoming:         Indices (into the Network's connection list) of connections ending here
        outgoing:         Indices (into the Network's connection list) of connections starting here
        activations:      Contributions received so far in the current forward pass
        propagations:     Error contributions received so far in the current backward pass
        signal_error_sum: Error accumulated so far in the current backward pass
        adjustment:       Pending bias change computed by the backward pass
        delta:            Last bias change applied (used for momentum)
    """

    def __init__(self,
                 node_id  : int,
                 node_type: NodeType,
                 bias     : float = 0.0,
                 squash   : str   = "sigmoid"):
        """
        Parameters:
            node_id:   ID of the node
            node_type: Node type (INPUT, HIDDEN, or OUTPUT)
            bias:      Bias added to the net input before squashing
            squash:    Name of the squash function

        Raises:
            UnknownSquashError: if the squash function is not registered
        """
        self.id    : int      = node_id
        self.type  : NodeType = NodeType(node_type)
        self.bias  : float    = bias
        self.squash: Squash   = get_squash(squash)

        self.net_input: float = 0.0
        self.output   : float = 0.0

        self.incoming: list[int] = []
        self.outgoing: list[int] = []

        self.activations     : int   = 0
        self.propagations    : int   = 0
        self.signal_error_sum: float = 0.0
        self.adjustment      : float = 0.0
        self.delta           : float = 0.0

    @classmethod
    def from_gene(cls, gene: "NodeGene") -> "Node":
        return cls(gene.id, gene.type, gene.bias, gene.squash)

    def activate(self, value: float) -> bool:
        """
        Receive one contribution to the net input of this forward pass.

        Parameters:
            value: the weighted output of a predecessor (or the pattern value for an input node)

        Returns:
            True if this contribution was the last one expected, and the node fired
        """
        if self.activations == 0:
            self.net_input = value
        else:
            self.net_input += value

        self.activations += 1
        if self.activations < len(self.incoming):
            return False

        # heard from all incoming connections
        self.activations = 0
        if self.type == NodeType.INPUT:
            self.output = self.net_input
        else:
            self.net_input += self.bias
            self.output = self.squash.function(self.net_input)
        return True

    def propagate_output(self, ideal: float, learning_rate: float) -> float:
        """
        Start the backward pass at an output node (squared error loss).

        Parameters:
            ideal:         the target value for this node's output
            learning_rate: the gradient descent step size

        Returns:
            the error signal of this node, to be weighted and sent upstream
        """
        derivative   = self.squash.derivative(self.net_input)
        signal_error = derivative * (self.output - ideal)
        self.adjustment = -learning_rate * signal_error * derivative
        return signal_error

    def propagate_hidden(self, signal_error: float, learning_rate: float) -> float | None:
        """
        Receive one error contribution from a downstream connection.

        Parameters:
            signal_error:  the (weighted) error signal of a successor
            learning_rate: the gradient descent step size

        Returns:
            the error signal of this node once every outgoing connection has
            contributed, None while contributions are still missing
        """
        self.signal_error_sum += signal_error

        self.propagations += 1
        if self.propagations < len(self.outgoing):
            return None

        # heard from all outgoing connections
        self.propagations = 0
        derivative      = self.squash.derivative(self.net_input)
        self.adjustment = -learning_rate * self.signal_error_sum * derivative
        return derivative * self.signal_error_sum

    def adjust(self, momentum: float = 0.0) -> None:
        """
        Apply the pending adjustment (plus momentum) to the bias,
        then clear the pending adjustment and the error accumulator.

        Parameters:
            momentum: fraction of the previously applied change to add
        """
        step = self.adjustment + momentum * self.delta
        self.bias += step
        self.delta = step
        self.adjustment       = 0.0
        self.signal_error_sum = 0.0
        self.propagations     = 0

    def __repr__(self):
        return (f"Node(node_id={self.id}, node_type=NodeType.{self.type.name}, "
                f"bias={self.bias}, squash='{self.squash.name}')")

    def __str__(self):
        return f"Node({self.id:+03d}, NodeType.{self.type.name:6s}, {self.bias}, {self.squash.name})"
