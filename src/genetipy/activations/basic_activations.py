import numpy as np

def identity_activation(z):
    return z

def sigmoid_activation(z):
    z = np.clip(z, -100, 100)   # to prevent under/overflow when calculating exp
    return 1.0 / (1.0 + np.exp(-z))

def tanh_activation(z):
    return np.tanh(z)

activations = {
    "identity": identity_activation,
    "sigmoid" : sigmoid_activation,
    "tanh"    : tanh_activation
    }

# 3-letter identifiers for each activation function
activation_codes = {
    "identity": "IDN",
    "sigmoid" : "SIG",
    "tanh"    : "TNH"
    }
