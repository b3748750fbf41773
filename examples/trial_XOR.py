"""
XOR Problem Implementation for NEAT

This module runs NEAT on the classic XOR (exclusive OR) problem, a benchmark
demonstrating the necessity of hidden nodes for solving non-linearly separable
problems.

The XOR Problem:
    XOR is a two-input, one-output boolean function where the output is True
    only when the inputs differ:
        Input (0, 0) → Output 0
        Input (0, 1) → Output 1
        Input (1, 0) → Output 1
        Input (1, 1) → Output 0

Fitness Function:
    Fitness = 10000 * Σ(1 - |output - target|)² / number of similar genomes

    A perfect network scores 40000 before the fitness is shared with similar genomes.

Usage:
    python examples/trial_XOR.py [config_file]
"""

import sys
from pathlib import Path

from genetipy import Config, DataEntry, Genome, NeatSolver, NetworkLayered

XOR_DATASET = [
    DataEntry.from_lists([0.0, 0.0], [0.0]),
    DataEntry.from_lists([0.0, 1.0], [1.0]),
    DataEntry.from_lists([1.0, 0.0], [1.0]),
    DataEntry.from_lists([1.0, 1.0], [0.0]),
]

def report(genome: Genome):
    """
    Display the fittest genome and how its network performs on XOR.
    """
    network = NetworkLayered(genome)

    s  = "\nFITTEST GENOME:\n"
    s += str(genome)
    s += '\n\n'
    s += f"Network: {network.number_nodes} nodes ({network.number_nodes_hidden} hidden), "
    s += f"{network.number_connections_enabled} enabled connections\n\n"

    s += "input         output   target  error\n"
    s += "------------------------------------\n"
    for entry in XOR_DATASET:
        output = network.forward_pass(entry.inputs)[0]
        target = entry.outputs[0]
        s += f"{list(entry.inputs)} -> {output:.4f}    {target}   {abs(output - target):.4f}\n"

    print(s)

    # Visualize the network
    try:
        network.visualize(view=True)
        print("Network visualization saved as 'Digraph.gv.pdf'")
    except Exception as e:
        print(f"Could not visualize network: {e}")

if __name__ == "__main__":

    config_file = sys.argv[1] if len(sys.argv) > 1 else Path(__file__).parent / "config_xor.ini"
    config = Config(str(config_file))

    best = NeatSolver(config, XOR_DATASET).solve()
    report(best)
