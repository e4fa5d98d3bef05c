"""Tests for the fixed-parameter CTRNN and the Node container."""

import math

import pytest
import torch

from ctrnn import (
    CTRNN,
    CTRNNConfig,
    ConfigurationError,
    DimensionMismatchError,
    Node,
    RLCTRNN,
    UnsupportedOperationError,
    sigmoid,
)


@pytest.mark.unit
class TestNode:

    def test_defaults(self):
        node = Node()
        assert node.bias == 0.0
        assert node.time_constant == 1.0

    def test_from_resting_output(self):
        node = Node.from_resting_output(0.8, time_constant=2.0)
        assert sigmoid(node.bias) == pytest.approx(0.8)
        assert node.time_constant == 2.0

    def test_from_saturated_output(self):
        assert Node.from_resting_output(1.0).bias == math.inf


@pytest.mark.unit
class TestCTRNN:

    def test_creation(self):
        net = CTRNN(6)
        assert net.n_nodes == 6
        assert net.weights.shape == (6, 6)
        assert net.biases.shape == (6,)
        assert net.time_constants.shape == (6,)
        assert net.state.shape == (6,)

    def test_two_node_scenario(self):
        net = CTRNN(2)
        net.set_weight(0, 1, 1.0)
        net.set_weight(1, 0, 1.0)
        nxt = net.update(0.1, [1.0, 0.0], [0.0, 0.0])
        assert nxt.tolist() == pytest.approx([0.95, 0.1 * sigmoid(1.0)])

    def test_matches_rlctrnn_without_exploration(self):
        """Both variants integrate the same equation."""
        fixed, adaptive = CTRNN(3), RLCTRNN(3)
        params = [(0, 1, 0.8), (1, 2, -1.2), (2, 0, 0.5), (1, 1, 0.3)]
        for source, target, w in params:
            fixed.set_weight(source, target, w)
            adaptive.set_weight(source, target, w)
        for i, (b, tau) in enumerate([(0.1, 1.0), (-0.4, 2.5), (0.0, 0.7)]):
            fixed.set_bias(i, b)
            adaptive.set_bias(i, b)
            fixed.set_time_constant(i, tau)
            adaptive.set_time_constant(i, tau)

        v = [0.3, -0.2, 1.1]
        assert torch.allclose(fixed.update(0.05, v, [0.1]), adaptive.update(0.05, v, [0.1]))

    def test_from_nodes(self):
        nodes = [Node(0.5, 2.0), Node(-0.5, 0.5)]
        net = CTRNN.from_nodes(nodes, weights=[[0.0, 1.0], [2.0, 0.0]])
        assert net.nodes() == nodes
        assert net.get_weight(1, 0) == 1.0
        assert net.get_weight(0, 1) == 2.0

    def test_from_nodes_bad_weights(self):
        with pytest.raises(DimensionMismatchError):
            CTRNN.from_nodes([Node(), Node()], weights=[[1.0, 0.0]])

    def test_from_nodes_bad_time_constant(self):
        with pytest.raises(ConfigurationError):
            CTRNN.from_nodes([Node(time_constant=0.0)])

    def test_tick_and_reset(self):
        net = CTRNN(2, CTRNNConfig(dt=0.1))
        first = net.tick(inputs=[1.0])
        assert first.tolist() == pytest.approx([1.0, 0.0])
        assert torch.equal(net.state, first)

        second = net.tick()
        assert second[0].item() == pytest.approx(1.0 - 0.1)
        assert torch.equal(net.state, second)

        net.reset_state()
        assert net.state.tolist() == [0.0, 0.0]

    def test_tick_returns_copy(self):
        net = CTRNN(1)
        out = net.tick(inputs=[1.0])
        out.zero_()
        assert net.state.item() == pytest.approx(1.0)

    def test_snapshot_is_detached_from_buffers(self):
        net = CTRNN(2)
        snap = net.snapshot()
        net.set_weight(0, 1, 3.0)
        assert snap.weights[1, 0].item() == 0.0

    def test_index_and_size_contracts(self):
        net = CTRNN(2)
        with pytest.raises(IndexError):
            net.set_bias(2, 0.0)
        with pytest.raises(IndexError):
            net.get_weight(-1, 0)
        with pytest.raises(DimensionMismatchError):
            net.update(0.1, [0.0])
        with pytest.raises(UnsupportedOperationError):
            net.add_node()

    def test_float32(self):
        net = CTRNN(2, CTRNNConfig(dtype="float32"))
        assert net.update(0.1, [0.0, 0.0]).dtype == torch.float32
