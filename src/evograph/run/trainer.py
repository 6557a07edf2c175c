"""
Evograph Trainer Module

This module implements a simple training loop over a fixed data set.

Classes:
    Trainer: Repeated gradient descent passes over a set of training examples
"""

import logging
from typing import TYPE_CHECKING, Sequence

from evograph.run.config import Config

if TYPE_CHECKING:
    from evograph.phenotype import Network

logger = logging.getLogger(__name__)

class Trainer:
    """
    Train a Network on a data set, one example at a time.

    Each epoch calls 'Network.train' on every example, in order, then measures
    the mean squared error of the updated network over the whole data set.
    Training stops after 'config.epochs' epochs, or as soon as the error is at
    or below 'config.target_loss'.

    Public Attributes:
        history: Mean squared error measured after each completed epoch

    Public Methods:
        run(examples): Train the network, returning the final error
    """

    def __init__(self,
                 network        : 'Network',
                 config         : Config | None = None,
                 suppress_output: bool = False):
        """
        Parameters:
            network:         the network to train (modified in place)
            config:          training parameters; defaults to the network's own config
            suppress_output: If True, do not log progress reports
        """
        self._network         = network
        self._config          = config if config is not None else network.config
        self._suppress_output = suppress_output
        self.history: list[float] = []

    @property
    def network(self) -> 'Network':
        return self._network

    def run(self, examples: Sequence[dict]) -> float:
        """
        Train the network on the examples.

        Parameters:
            examples: training examples, each {"input": [...], "output": [...]}

        Returns:
            the mean squared error after the last epoch
        """
        if not examples:
            raise ValueError("Cannot train on an empty data set")

        loss = self._network.mean_squared_error(examples)
        for epoch in range(1, self._config.epochs + 1):
            for example in examples:
                self._network.train(example)

            loss = self._network.mean_squared_error(examples)
            self.history.append(loss)

            if not self._suppress_output and epoch % self._config.report_interval == 0:
                logger.info("Epoch %5d: mean squared error = %.6f", epoch, loss)

            if loss <= self._config.target_loss:
                if not self._suppress_output:
                    logger.info("Reached target loss %.6f after %d epochs", self._config.target_loss, epoch)
                break

        return loss
