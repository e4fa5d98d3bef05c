"""
Integration tests driving networks through a caller-side reward loop.
"""

import math

import pytest

from ctrnn import FluctuatorConfig, RLCTRNN, RLCTRNNConfig


@pytest.mark.integration
class TestRewardLoop:

    def test_rewarding_high_output_raises_bias(self):
        """Rewarding only above-midpoint outputs pushes the bias center up."""
        flux = FluctuatorConfig(initial_amplitude=1.0, convergence_rate=0.0)
        net = RLCTRNN(1, RLCTRNNConfig(fluctuator=flux))
        bias = next(net.fluctuators())
        v = net.init_voltage()

        for _ in range(300):
            out = net.get_outputs(v).item()
            reward = 1.0 if out > 0.5 else 0.0
            net.reinforce_bias(0, 0.1, reward)

        assert bias.center > 0.5
        assert bias.amplitude == 1.0

    def test_closed_loop_is_deterministic(self, exploring_config):
        """Two identically driven networks stay identical."""

        def run():
            net = RLCTRNN(3, RLCTRNNConfig(fluctuator=exploring_config))
            net.set_weight(0, 1, 0.8)
            net.set_weight(1, 2, 0.8)
            net.set_weight(2, 0, -0.8)
            for i in range(3):
                net.set_time_constant(i, 12.0)
            v = net.init_voltage()
            trace = []
            for step in range(100):
                v = net.update(0.1, v, [0.05])
                out = net.get_outputs(v)
                reward = 1.0 - abs(out[2].item() - 0.7)
                net.reinforce(0.1, reward)
                trace.append(v.tolist())
            return trace, [f.center for f in net.fluctuators()]

        first, second = run(), run()
        assert first == second
        assert all(math.isfinite(x) for row in first[0] for x in row)

    def test_annealing_under_sustained_reward(self):
        """Sustained positive reward collapses exploration to its floor."""
        net = RLCTRNN(2, RLCTRNNConfig(fluctuator=FluctuatorConfig(initial_amplitude=5.0)))
        for _ in range(10):
            net.reinforce(0.2, 0.6)
        low, _ = net.config.fluctuator.amplitude_range
        assert all(f.amplitude == low for f in net.fluctuators())
