"""
Command line interface

Usage:
    jsbind [--property-accessors] FILE...
"""

import argparse
import sys
from typing import Optional

from .config import BindingConfig
from .errors import BindingError
from .generator import Generator


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='jsbind',
        description='Generate JSObject bindings from C# interface declarations')
    parser.add_argument('files', nargs='*', metavar='FILE',
                        help='Declaration files; FILE.ext is generated as FILE.g.ext')
    parser.add_argument('--property-accessors', action='store_true',
                        help='Emit get/set forwarding for properties instead of empty accessor blocks')
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    if not args.files:
        print('ERROR: Please provide at least one bindings file.', file=sys.stderr)
        return 1

    generator = Generator(BindingConfig(property_accessors=args.property_accessors))

    for input_path in args.files:
        try:
            generator.generate_file(input_path)
        except BindingError as e:
            print(f'ERROR: {input_path}{e}', file=sys.stderr)
            return 1
        except OSError as e:
            print(f'ERROR: {input_path}: {e.strerror}', file=sys.stderr)
            return 1
        except UnicodeDecodeError:
            print(f'ERROR: {input_path}: not a UTF-8 text file', file=sys.stderr)
            return 1

    return 0
