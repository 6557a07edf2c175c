"""
Evograph Run Package

Modules:
    config:  Config class (INI-backed network and training parameters)
    trainer: Trainer class (epoch loop over a data set)
"""

from evograph.run.config  import Config
from evograph.run.trainer import Trainer

__all__ = ['Config',
           'Trainer']
