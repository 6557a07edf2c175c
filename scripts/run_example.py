#!/usr/bin/env python3
"""
Utility script to run evograph examples easily.

Usage:
    python scripts/run_example.py xor
    python scripts/run_example.py linear --export trained.json
"""

import sys
import argparse
import json
import logging
from pathlib import Path

# Add the repository root (examples) and the source directory to the path
ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(ROOT))
sys.path.insert(0, str(ROOT / "src"))

from evograph import Config
from examples import train_linear, train_xor


EXAMPLES = {
    'xor': {
        'module': train_xor,
        'config': ROOT / 'examples' / 'configs' / 'config_xor.ini',
        'description': 'XOR logic problem'
    },
    'linear': {
        'module': train_linear,
        'config': ROOT / 'examples' / 'configs' / 'config_linear.ini',
        'description': 'Linear regression'
    }
}


def main():
    parser = argparse.ArgumentParser(description='Run evograph examples')
    parser.add_argument('example', choices=EXAMPLES.keys(),
                        help='Example to run')
    parser.add_argument('--export', type=str, default=None,
                        help='Write the trained network (config + genome) to this JSON file')
    parser.add_argument('--quiet', action='store_true',
                        help='Do not report training progress')

    args = parser.parse_args()
    logging.basicConfig(level=logging.INFO, format="[%(asctime)s][%(levelname)s] %(message)s")

    example = EXAMPLES[args.example]
    logging.info("Running %s...", example['description'])

    config  = Config(str(example['config']))
    network = example['module'].run(config, suppress_output=args.quiet)
    logging.info("Trained network:\n%s", network)

    if args.export:
        with open(args.export, 'w') as f:
            json.dump(network.export(), f, indent=2)
        logging.info("Network exported to %s", args.export)


if __name__ == '__main__':
    main()
