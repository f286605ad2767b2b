import argparse
import logging

import matplotlib.pyplot as plt
import torch

from gatenet.constants import (
    DEFAULT_CUTOFF,
    DEFAULT_MAX_EPOCHS,
    LEARNING_RATE,
    SAMPLE_SEED,
    TARGET_ACCURACY,
)
from gatenet.graph import draw_network
from gatenet.network import Network
from gatenet.plotting import plot_accuracy_history

# Logical AND.
AND_GATE = {
    (0.0, 0.0): 0.0,
    (0.0, 1.0): 0.0,
    (1.0, 0.0): 0.0,
    (1.0, 1.0): 1.0,
}


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="gatenet", description="Train a two-input neuron on logical AND."
    )
    parser.add_argument("--seed", type=int, default=SAMPLE_SEED)
    parser.add_argument("--learning-rate", type=float, default=LEARNING_RATE)
    parser.add_argument("--target-accuracy", type=float, default=TARGET_ACCURACY)
    parser.add_argument(
        "--max-epochs",
        type=int,
        default=DEFAULT_MAX_EPOCHS,
        help="epoch cap; 0 trains until the target accuracy is reached",
    )
    parser.add_argument(
        "--graph", action="store_true", help="render the trained network with graphviz"
    )
    parser.add_argument(
        "--plot", action="store_true", help="plot the accuracy history"
    )
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args(argv)
    if args.max_epochs < 0:
        parser.error(f"--max-epochs must be 0 or positive, got {args.max_epochs}")
    return args


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    # Seeded generator for reproducible initialization.
    g = torch.Generator().manual_seed(args.seed)
    net = Network(generator=g)
    for inputs, target in AND_GATE.items():
        net.add_example(inputs, target)

    print("Learning...")
    result = net.train(
        args.learning_rate,
        args.target_accuracy,
        max_epochs=args.max_epochs or None,
    )
    status = "converged" if result.converged else "did not converge"
    print(f"Training {status} after {result.epochs} epochs, accuracy {result.accuracy:.4f}")

    for inputs in [(1.0, 1.0), (0.0, 1.0), (1.0, 0.0), (0.0, 0.0)]:
        print(f"{inputs} {net.predict(inputs, DEFAULT_CUTOFF)}")

    if args.graph:
        draw_network(net).render("gatenet-network", view=True)

    if args.plot:
        plot_accuracy_history(result.history, args.target_accuracy)
        plt.show()

    return 0 if result.converged else 1


if __name__ == "__main__":
    raise SystemExit(main())
