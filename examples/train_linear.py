"""
Linear Regression Trained by Gradient Descent

Fits y = 2*x1 - x2 + 0.5 with the default genome (every input connected to
every output) and identity squash functions.
"""

import numpy as np

from evograph.phenotype import Network
from evograph.run       import Config, Trainer

def linear_examples(num_samples: int = 20, seed: int = 0) -> list[dict]:
    rng = np.random.default_rng(seed)
    examples = []
    for x1, x2 in rng.uniform(-1.0, 1.0, size=(num_samples, 2)):
        examples.append({"input": [float(x1), float(x2)], "output": [float(2.0 * x1 - x2 + 0.5)]})
    return examples

def run(config: Config, suppress_output: bool = False) -> Network:
    network = Network(config=config)
    trainer = Trainer(network, suppress_output=suppress_output)
    trainer.run(linear_examples())
    return network
