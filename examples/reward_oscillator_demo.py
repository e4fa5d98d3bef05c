"""
Reward-Driven CTRNN Demo

Demonstrates a caller-side reinforcement loop around an RLCTRNN. A
two-node network is rewarded for holding the output of node 1 near a
target level; every parameter explores around its center and anneals as
the reward improves.
"""

import argparse
import logging

from ctrnn import FluctuatorConfig, RLCTRNN, RLCTRNNConfig


def demo_target_tracking(steps: int, target: float, dt: float) -> None:
    """Reward node 1 for tracking a fixed output level."""
    print("=" * 60)
    print("Reward-Driven Output Tracking Demo")
    print("=" * 60)

    config = RLCTRNNConfig(
        seed=42,
        fluctuator=FluctuatorConfig(initial_amplitude=0.5, learning_rate=0.2),
    )
    net = RLCTRNN(2, config)
    net.set_weight(0, 1, 1.0)
    net.set_weight(1, 0, -1.0)
    net.set_time_constant(0, 8.0)
    net.set_time_constant(1, 8.0)

    print(f"Created RLCTRNN with {net.n_nodes} nodes and {net.n_fluctuators} fluctuators")

    voltages = net.init_voltage()
    errors = []
    window = max(1, steps // 10)
    for step in range(steps):
        voltages = net.update(dt, voltages, [0.02])
        output = net.get_outputs(voltages)[1].item()
        error = abs(output - target)
        errors.append(error)

        # Reward is the error relative to the recent average
        baseline = sum(errors[-20:]) / len(errors[-20:])
        net.reinforce(dt, baseline - error)

        if step % window == 0:
            print(f"step {step:5d}  output={output:.3f}  error={error:.3f}")

    snap = net.snapshot()
    print("\nFinal weights:")
    print(snap.weights)
    print(f"Final biases:          {snap.biases.tolist()}")
    print(f"Final time constants:  {snap.time_constants.tolist()}")
    print(f"Mean error (first 10%): {sum(errors[:window]) / window:.4f}")
    print(f"Mean error (last 10%):  {sum(errors[-window:]) / window:.4f}")


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--steps", type=int, default=2000)
    parser.add_argument("--target", type=float, default=0.7)
    parser.add_argument("--dt", type=float, default=0.1)
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)
    demo_target_tracking(args.steps, args.target, args.dt)


if __name__ == "__main__":
    main()
