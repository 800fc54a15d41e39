"""
evobench Command-Line Interface

Evaluate benchmark functions and print their search domains from the shell.
"""

import sys
import argparse
import warnings
import numpy as np

from .core.canonical_json import canonical_dumps
from .errors import EvobenchError
from .problem import PROBLEM_INFO, Problem, domain, fitness_batch
from .records import evaluate


def _problem(name: str) -> Problem:
    try:
        return Problem.from_name(name)
    except EvobenchError as e:
        raise argparse.ArgumentTypeError(str(e))


def cmd_fitness(args):
    """Evaluate one point."""
    record = evaluate(args.problem, args.x, strict=args.strict)
    if args.json:
        print(canonical_dumps(record.to_canonical()))
    else:
        print(repr(record.value))
    return 0


def cmd_domain(args):
    """Print the per-coordinate domain."""
    lo, hi = domain(args.problem)
    if args.json:
        print(canonical_dumps({'problem': args.problem.value, 'lo': lo, 'hi': hi}))
    else:
        print(f"{lo!r} {hi!r}")
    return 0


def cmd_batch(args):
    """Evaluate every row of a whitespace-separated text file."""
    try:
        with warnings.catch_warnings():
            # Empty input is reported below
            warnings.simplefilter('ignore', UserWarning)
            X = np.loadtxt(args.file, dtype=np.float64, ndmin=2)
    except (OSError, ValueError) as e:
        print(f"Error: cannot read '{args.file}': {e}")
        return 1
    if X.size == 0:
        print(f"Error: '{args.file}' contains no points")
        return 1

    values = fitness_batch(args.problem, X, strict=args.strict)
    for v in values:
        print(repr(float(v)))

    if args.output:
        output_data = {
            'problem': args.problem.value,
            'dimension': int(X.shape[1]),
            'points': X.tolist(),
            'values': values.tolist(),
        }
        with open(args.output, 'w') as f:
            f.write(canonical_dumps(output_data, indent=2))
        print(f"\nResults saved to: {args.output}")
    return 0


def cmd_list(args):
    """List the available problems."""
    for problem, info in PROBLEM_INFO.items():
        lo, hi = info['bounds']
        print(f"{problem.value:10} [{lo}, {hi}]  {info['formula']}")
        print(f"{'':10} {info['optimum']}")
    return 0


def cmd_version(args):
    """Print version information."""
    from . import __version__
    print(f"evobench {__version__}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='evobench',
        description='evobench - Benchmark Problem Evaluator'
    )
    subparsers = parser.add_subparsers(dest='command', help='Commands')

    fit_parser = subparsers.add_parser('fitness', help='Evaluate a point')
    fit_parser.add_argument('problem', type=_problem,
                            help='Problem name (ackley, griewangk, schwefel)')
    fit_parser.add_argument('x', type=float, nargs='+',
                            help='Coordinates of the point')
    fit_parser.add_argument('--strict', action='store_true',
                            help='Reject non-finite coordinates')
    fit_parser.add_argument('--json', action='store_true',
                            help='Print the evaluation record as JSON')
    fit_parser.set_defaults(func=cmd_fitness)

    dom_parser = subparsers.add_parser('domain', help='Print the search domain')
    dom_parser.add_argument('problem', type=_problem, help='Problem name')
    dom_parser.add_argument('--json', action='store_true',
                            help='Print as JSON')
    dom_parser.set_defaults(func=cmd_domain)

    batch_parser = subparsers.add_parser('batch', help='Evaluate points from a file')
    batch_parser.add_argument('problem', type=_problem, help='Problem name')
    batch_parser.add_argument('file', help='Text file with one point per row')
    batch_parser.add_argument('--strict', action='store_true',
                              help='Reject non-finite coordinates')
    batch_parser.add_argument('--output', '-o', type=str,
                              help='Output JSON file')
    batch_parser.set_defaults(func=cmd_batch)

    list_parser = subparsers.add_parser('list', help='List problems')
    list_parser.set_defaults(func=cmd_list)

    ver_parser = subparsers.add_parser('version', help='Print version')
    ver_parser.set_defaults(func=cmd_version)

    return parser


def main(argv=None):
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    try:
        return args.func(args)
    except EvobenchError as e:
        print(f"Error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
