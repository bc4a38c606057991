"""Interactive console: train or load the XOR network, then query it."""
from __future__ import annotations

import argparse
import logging
from pathlib import Path
import sys
from typing import List, Optional, Sequence, TextIO

from tqdm.auto import tqdm

from .config import NetworkConfig, TrainingConfig
from .data import xor_training_set
from .exceptions import InvalidArgumentError
from .network import NeuralNetwork, TrainingCallbacks, TrainingOutcome
from .persistence import DEFAULT_MODEL_PATH, load_model, save_model
from .utils.ascii_graph import render_error_graph

logger = logging.getLogger(__name__)

INTRO = """
╔════════════════════════════════════════════════════╗
║          Neural network: the XOR logic gate        ║
╚════════════════════════════════════════════════════╝

An XOR (exclusive OR) gate returns:
 → 1 when both inputs differ
 → 0 when they are the same

  Input A    Input B    Expected output
  ─────────  ─────────  ───────────────
     0          0              0
     0          1              1
     1          0              1
     1          1              0

The network learns this rule from the four examples alone,
adjusting its weights until every answer is confident enough.
"""

QUIT_WORDS = {"q", "quit", "exit"}


def _ask(message: str, stdin: TextIO, stdout: TextIO) -> str:
    stdout.write(message)
    stdout.flush()
    line = stdin.readline()
    if not line:
        raise EOFError
    return line.rstrip("\r\n")


def ask_use_existing(stdin: TextIO = sys.stdin, stdout: TextIO = sys.stdout) -> bool:
    """Return ``False`` only when the user explicitly answers ``n``."""

    answer = _ask("Use the existing model if present? (Y/n): ", stdin, stdout)
    return answer.strip().lower() not in {"n", "no"}


def read_binary_input(
    label: str, stdin: TextIO = sys.stdin, stdout: TextIO = sys.stdout
) -> Optional[float]:
    """Prompt until the user types ``0`` or ``1``; ``None`` means quit."""

    answer = _ask(f"→ Input {label} (0 or 1): ", stdin, stdout)
    while True:
        if answer in {"0", "1"}:
            return float(answer)
        if answer.strip().lower() in QUIT_WORDS:
            return None
        answer = _ask("Please enter 0 or 1: ", stdin, stdout)


class TrainingReporter:
    """Turns training notifications into a progress bar and console output."""

    def __init__(self, max_epochs: int, *, log_interval: int = 1000, stdout: TextIO = sys.stdout):
        self.max_epochs = max_epochs
        self.log_interval = max(1, log_interval)
        self.stdout = stdout
        self.errors: List[float] = []
        self._bar: Optional[tqdm] = None

    def callbacks(self) -> TrainingCallbacks:
        return TrainingCallbacks(
            on_progress=self.on_progress,
            on_converged=self.on_converged,
            on_history=self.on_history,
        )

    def on_progress(self, epoch: int, total_error: float) -> None:
        if self._bar is None:
            self._bar = tqdm(total=self.max_epochs, desc="Training", unit="epoch")
        self._bar.update(1)
        if epoch % self.log_interval == 0:
            self._bar.set_postfix(error=f"{total_error:.6f}")

    def on_converged(self, confidence_threshold: float, epoch: int) -> None:
        self._close()
        print(
            f"\nThe network reached a confidence ≥ {confidence_threshold:.0%} at epoch {epoch}!",
            file=self.stdout,
        )

    def on_history(self, errors: List[float]) -> None:
        self._close()
        self.errors = errors
        print("\nError curve:", file=self.stdout)
        for line in render_error_graph(errors):
            print(line, file=self.stdout)

    def _close(self) -> None:
        if self._bar is not None:
            self._bar.close()
            self._bar = None


def train_and_save(
    network: NeuralNetwork,
    config: TrainingConfig,
    model_path: Path,
    *,
    plot_path: Optional[Path] = None,
    log_interval: int = 1000,
    stdout: TextIO = sys.stdout,
) -> TrainingOutcome:
    """Train on the XOR set, report progress and persist the learned parameters."""

    print("Training the network...\n", file=stdout)
    reporter = TrainingReporter(config.max_epochs, log_interval=log_interval, stdout=stdout)
    outcome = network.train(
        xor_training_set(),
        max_epochs=config.max_epochs,
        learning_rate=config.learning_rate,
        confidence_threshold=config.confidence_threshold,
        callbacks=reporter.callbacks(),
    )
    if not outcome.converged:
        print(
            f"\nNo convergence after {outcome.epochs_run} epochs "
            f"(final error {outcome.final_error:.6f}).",
            file=stdout,
        )
    print("\nTraining finished!", file=stdout)
    save_model(network.export_model(), model_path)
    if plot_path is not None:
        from .utils.visualization import plot_error_history

        plot_error_history(outcome.error_history, plot_path)
        print(f"Saved error plot to {plot_path}", file=stdout)
    return outcome


def try_load(network: NeuralNetwork, model_path: Path, stdout: TextIO = sys.stdout) -> bool:
    """Import the model at ``model_path``; report and return ``False`` on failure."""

    if not model_path.exists():
        return False
    print("Loading the existing model...", file=stdout)
    try:
        network.import_model(load_model(model_path))
    except (InvalidArgumentError, OSError) as exc:
        logger.warning("Could not load %s: %s", model_path, exc)
        print(f"Could not load {model_path} ({exc}); training a new model.", file=stdout)
        return False
    print("Model loaded!", file=stdout)
    return True


def run_interaction_loop(
    network: NeuralNetwork, stdin: TextIO = sys.stdin, stdout: TextIO = sys.stdout
) -> int:
    """Answer queries until the user quits or input ends; return the number answered."""

    print("\nYou can now test the network with binary inputs (q to quit).\n", file=stdout)
    answered = 0
    try:
        while True:
            a = read_binary_input("A", stdin, stdout)
            if a is None:
                break
            b = read_binary_input("B", stdin, stdout)
            if b is None:
                break
            output = network.compute([a, b])
            print(f"→ Network output: {output:.0f} ({output:.4f})", file=stdout)
            print("---\n", file=stdout)
            answered += 1
    except EOFError:
        print("", file=stdout)
    return answered


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    defaults = TrainingConfig()
    parser = argparse.ArgumentParser(description="Train and query a neural network on XOR")
    parser.add_argument("--model-path", type=Path, default=DEFAULT_MODEL_PATH, help="JSON model file")
    parser.add_argument("--reset", action="store_true", help="Retrain without asking")
    parser.add_argument("--hidden-count", type=int, default=2)
    parser.add_argument("--max-epochs", type=int, default=defaults.max_epochs)
    parser.add_argument("--learning-rate", type=float, default=defaults.learning_rate)
    parser.add_argument("--confidence", type=float, default=defaults.confidence_threshold)
    parser.add_argument("--log-interval", type=int, default=1000, help="Epochs between error updates")
    parser.add_argument("--plot-path", type=Path, default=None, help="Save a plot of the error curve")
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--verbose", action="store_true")
    return parser.parse_args(argv)


def main(
    argv: Optional[Sequence[str]] = None,
    *,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
) -> int:
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    network = NeuralNetwork.from_config(
        NetworkConfig(input_count=2, hidden_count=args.hidden_count, seed=args.seed)
    )
    training = TrainingConfig(
        max_epochs=args.max_epochs,
        learning_rate=args.learning_rate,
        confidence_threshold=args.confidence,
    )

    print(INTRO, file=stdout)
    try:
        use_existing = not args.reset and ask_use_existing(stdin, stdout)
    except EOFError:
        return 0

    if not (use_existing and try_load(network, args.model_path, stdout)):
        train_and_save(
            network,
            training,
            args.model_path,
            plot_path=args.plot_path,
            log_interval=args.log_interval,
            stdout=stdout,
        )

    run_interaction_loop(network, stdin, stdout)
    return 0


__all__ = [
    "INTRO",
    "TrainingReporter",
    "ask_use_existing",
    "main",
    "parse_args",
    "read_binary_input",
    "run_interaction_loop",
    "train_and_save",
    "try_load",
]
