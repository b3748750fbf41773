"""
Activations Package

This package provides the activation functions available to network nodes.
The set is closed: input nodes use 'identity', hidden nodes 'tanh' and
output nodes 'sigmoid'.

Exported:
    activations:      Dictionary mapping activation function names to functions
    activation_codes: Dictionary mapping activation function names to 3-letter codes
    Individual activation functions: identity_activation, sigmoid_activation, tanh_activation
"""

from genetipy.activations.basic_activations import (
    activations,
    activation_codes,
    identity_activation,
    sigmoid_activation,
    tanh_activation
)

__all__ = [
    'activations',
    'activation_codes',
    'identity_activation',
    'sigmoid_activation',
    'tanh_activation'
]
