"""
Train a small MLP on the 4-sample toy dataset.

    python -m scalar_aad.training --seed 0 --iterations 100
"""

import argparse
from dataclasses import replace

from ..nn.mlp import MLP
from .config import DEMO_XS, DEMO_YS, TrainingConfig
from .loop import train


def parse_layers(layer_str):
    """Parse '4,4,1' into [4, 4, 1]."""
    return [int(n) for n in layer_str.split(',') if n.strip()]


def parse_args(argv=None):
    """Parse command line arguments."""
    defaults = TrainingConfig.demo()
    parser = argparse.ArgumentParser(
        description='Manual gradient-descent training of a scalar-node MLP',
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )
    parser.add_argument('--layers', type=str,
                        default=','.join(str(n) for n in defaults.layer_sizes),
                        help='Comma-separated layer widths (last is the output width)')
    parser.add_argument('--learning-rate', type=float, default=defaults.learning_rate,
                        help='Gradient-descent step size')
    parser.add_argument('--iterations', type=int, default=defaults.iterations,
                        help='Maximum number of training iterations')
    parser.add_argument('--target-loss', type=float, default=defaults.target_loss,
                        help='Stop once the loss falls below this value')
    parser.add_argument('--no-early-stop', action='store_true',
                        help='Run every iteration regardless of --target-loss')
    parser.add_argument('--seed', type=int, default=None,
                        help='Seed for weight initialisation')
    parser.add_argument('--log-every', type=int, default=1,
                        help='Print the loss every N iterations')
    parser.add_argument('--quiet', action='store_true',
                        help='Only print the final summary')
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    config = TrainingConfig.demo().with_overrides(
        layer_sizes=parse_layers(args.layers),
        learning_rate=args.learning_rate,
        iterations=args.iterations,
        target_loss=args.target_loss,
        seed=args.seed,
        verbose=not args.quiet,
        log_every=args.log_every,
    )
    if args.no_early_stop:
        config = replace(config, target_loss=None)
    config.validate()

    model = MLP(len(DEMO_XS[0]), config.layer_sizes, rng=config.seed)
    print(f"Model: {model}  ({len(model.parameters())} parameters)")

    result = train(model, DEMO_XS, DEMO_YS, config)

    print("\n" + "="*70)
    print("TRAINING RESULT")
    print("="*70)
    print(f"Initial loss:   {result.initial_loss:.6f}")
    print(f"Final loss:     {result.final_loss:.6f}")
    print(f"Converged:      {result.converged}")
    print(f"Runtime:        {result.runtime_sec:.3f} s")
    print()
    for x, y, pred in zip(DEMO_XS, DEMO_YS, result.predictions):
        print(f"  x={x}  target={y:+.1f}  prediction={pred[0]:+.6f}")
    print("="*70)
    return result


if __name__ == "__main__":
    main()
