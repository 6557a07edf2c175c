import autograd.numpy as np  # type: ignore
from autograd import grad    # type: ignore
from typing   import Callable, NamedTuple

from evograph.errors import UnknownSquashError

def identity_activation(z):
    return z

def sigmoid_activation(z):
    z = np.clip(z, -500, 500)   # to prevent overflow when calculating exp
    return 1.0 / (1.0 + np.exp(-z))

def tanh_activation(z):
    return np.tanh(z)

def relu_activation(z):
    return np.maximum(0.0, z)

def clamped_activation(z):
    return np.clip(z, -1.0, 1.0)

def sin_activation(z):
    return np.sin(z)

def gaussian_activation(z):
    z = np.clip(z, -3.4, 3.4)
    return np.exp(-5.0 * z ** 2)

def abs_activation(z):
    return np.abs(z)

def square_activation(z):
    # Clip input to avoid overflow (±1e154 squared stays within float64 range)
    z_clipped = np.clip(z, -1e154, 1e154)
    return z_clipped ** 2

class Squash(NamedTuple):
    """A squash (activation) function together with its derivative."""
    name      : str
    function  : Callable[[float], float]
    derivative: Callable[[float], float]

    def __call__(self, z):
        return self.function(z)

def _make_squash(name: str, function: Callable[[float], float]) -> Squash:
    derivative = grad(function)

    # autograd differentiates with respect to floats only
    def _derivative(z):
        return derivative(float(z))

    return Squash(name, function, _derivative)

squashes = {
    "identity": _make_squash("identity", identity_activation),
    "sigmoid" : _make_squash("sigmoid" , sigmoid_activation),
    "tanh"    : _make_squash("tanh"    , tanh_activation),
    "relu"    : _make_squash("relu"    , relu_activation),
    "clamped" : _make_squash("clamped" , clamped_activation),
    "sin"     : _make_squash("sin"     , sin_activation),
    "gaussian": _make_squash("gaussian", gaussian_activation),
    "abs"     : _make_squash("abs"     , abs_activation),
    "square"  : _make_squash("square"  , square_activation),
    }

# 3-letter identifiers for each squash function
squash_codes = {
    "identity": "IDN",
    "sigmoid" : "SIG",
    "tanh"    : "TNH",
    "relu"    : "RLU",
    "clamped" : "CLP",
    "sin"     : "SIN",
    "gaussian": "GAU",
    "abs"     : "ABS",
    "square"  : "SQR",
    }

def get_squash(name: str) -> Squash:
    """
    Look up a squash function by name.

    Parameters:
        name: the registered name of the squash function

    Returns:
        the Squash entry (function and derivative)

    Raises:
        UnknownSquashError: if no squash function is registered under 'name'
    """
    try:
        return squashes[name]
    except KeyError:
        raise UnknownSquashError(name) from None
