"""
Unit tests for NodeGene class.
"""

import pytest

from genetipy.activations import sigmoid_activation, tanh_activation, identity_activation
from genetipy.genotype.node_gene import NodeGene, NodeType


class TestNodeGeneInit:

    @pytest.mark.parametrize("node_type, activation_name, activation", [
        (NodeType.INPUT,  'identity', identity_activation),
        (NodeType.HIDDEN, 'tanh',     tanh_activation),
        (NodeType.OUTPUT, 'sigmoid',  sigmoid_activation),
    ])
    def test_default_activation_by_type(self, node_type, activation_name, activation):
        node = NodeGene(7, node_type, 3)
        assert node.activation_name == activation_name
        assert node.activation is activation

    def test_attributes(self):
        node = NodeGene(5, NodeType.HIDDEN, 2)
        assert node.id == 5
        assert node.type == NodeType.HIDDEN
        assert node.layer == 2

    def test_explicit_activation(self):
        node = NodeGene(0, NodeType.OUTPUT, 20, activation_name='identity')
        assert node.activation_name == 'identity'

    def test_unknown_activation_raises(self):
        with pytest.raises(ValueError, match="Unknown activation"):
            NodeGene(0, NodeType.HIDDEN, 1, activation_name='relu')


class TestNodeGeneStrings:

    def test_str(self):
        assert str(NodeGene(0, NodeType.INPUT, 0))   == "[I0,L0,IDN]"
        assert str(NodeGene(4, NodeType.HIDDEN, 1))  == "[H4,L1,TNH]"
        assert str(NodeGene(2, NodeType.OUTPUT, 20)) == "[O2,L20,SIG]"

    def test_repr_mentions_type_and_layer(self):
        s = repr(NodeGene(3, NodeType.HIDDEN, 4))
        assert "NodeType.HIDDEN" in s
        assert "layer=04" in s
