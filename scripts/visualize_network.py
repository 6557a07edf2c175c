#!/usr/bin/env python3
"""
Utility script to visualize an exported evograph network.

Usage:
    python scripts/visualize_network.py --network trained.json
"""

import sys
import argparse
import json
from pathlib import Path

# Add the source directory to the path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from evograph import Network


def main():
    parser = argparse.ArgumentParser(description='Visualize evograph neural networks')
    parser.add_argument('--network', type=str, required=True,
                        help='Path to a JSON file written by Network.export()')
    parser.add_argument('--output', type=str, default='network',
                        help='Output filename (without extension)')
    parser.add_argument('--format', type=str, default='png',
                        choices=['png', 'pdf', 'svg'],
                        help='Output format')
    parser.add_argument('--no-view', action='store_true',
                        help='Do not automatically open the generated file')

    args = parser.parse_args()

    with open(args.network) as f:
        network = Network.from_export(json.load(f))

    dot = network.visualize(view=False)
    dot.format = args.format
    dot.render(args.output, view=not args.no_view, cleanup=True)
    print(f"Network visualization saved to {args.output}.{args.format}")


if __name__ == '__main__':
    main()
