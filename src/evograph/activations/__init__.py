"""
Activations Package

This package provides the squash (activation) functions used by evograph
nodes, each paired with its derivative.

Exported:
    squashes:     Dictionary mapping squash names to Squash entries
    squash_codes: Dictionary mapping squash names to 3-letter codes
    Squash:       Named tuple (name, function, derivative)
    get_squash:   Look up a Squash by name, raising UnknownSquashError if missing
    Individual squash functions: identity_activation, sigmoid_activation,
                                 tanh_activation, relu_activation,
                                 clamped_activation, sin_activation,
                                 gaussian_activation, abs_activation,
                                 square_activation
"""

from evograph.activations.basic_activations import (
    Squash,
    squashes,
    squash_codes,
    get_squash,
    identity_activation,
    sigmoid_activation,
    tanh_activation,
    relu_activation,
    clamped_activation,
    sin_activation,
    gaussian_activation,
    abs_activation,
    square_activation
)

__all__ = [
    'Squash',
    'squashes',
    'squash_codes',
    'get_squash',
    'identity_activation',
    'sigmoid_activation',
    'tanh_activation',
    'relu_activation',
    'clamped_activation',
    'sin_activation',
    'gaussian_activation',
    'abs_activation',
    'square_activation'
]
