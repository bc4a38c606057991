#!/usr/bin/env python3
"""Train the XOR network non-interactively and save the learned parameters."""
from __future__ import annotations

import argparse
from dataclasses import asdict
import json
import logging
from pathlib import Path

from neural_xor.config import NetworkConfig, TrainingConfig
from neural_xor.data import xor_training_set
from neural_xor.network import NeuralNetwork, TrainingCallbacks
from neural_xor.persistence import save_model


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--model-path", type=Path, default=Path("model.json"))
    parser.add_argument("--hidden-count", type=int, default=2)
    parser.add_argument("--max-epochs", type=int, default=200_000)
    parser.add_argument("--learning-rate", type=float, default=0.1)
    parser.add_argument("--confidence", type=float, default=0.95)
    parser.add_argument("--log-interval", type=int, default=0, help="Print the error every N epochs")
    parser.add_argument("--summary-path", type=Path, default=None, help="Write the outcome as JSON")
    parser.add_argument("--seed", type=int, default=0)
    parser.add_argument("--verbose", action="store_true")
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    logging.basicConfig(level=logging.INFO if args.verbose else logging.WARNING)
    network_config = NetworkConfig(input_count=2, hidden_count=args.hidden_count, seed=args.seed)
    training_config = TrainingConfig(
        max_epochs=args.max_epochs,
        learning_rate=args.learning_rate,
        confidence_threshold=args.confidence,
    )
    network = NeuralNetwork.from_config(network_config)

    def report(epoch: int, total_error: float) -> None:
        if args.log_interval and epoch % args.log_interval == 0:
            print(f"Epoch {epoch} - Total Error: {total_error:.6f}")

    outcome = network.train(
        xor_training_set(),
        **asdict(training_config),
        callbacks=TrainingCallbacks(on_progress=report),
    )
    save_model(network.export_model(), args.model_path)
    status = "converged" if outcome.converged else "did not converge"
    print(
        f"Training {status} after {outcome.epochs_run} epochs "
        f"(final error {outcome.final_error:.6f}); saved model to {args.model_path}"
    )

    if args.summary_path:
        summary = {
            "network": asdict(network_config),
            "training": asdict(training_config),
            "epochs_run": outcome.epochs_run,
            "final_error": outcome.final_error,
            "converged": outcome.converged,
            "predictions": {
                f"{int(sample.inputs[0])}{int(sample.inputs[1])}": network.compute(sample.inputs)
                for sample in xor_training_set()
            },
        }
        args.summary_path.write_text(json.dumps(summary, indent=2))
        print(f"Saved summary to {args.summary_path}")


if __name__ == "__main__":
    main()
