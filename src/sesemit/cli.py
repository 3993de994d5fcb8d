"""sesemit CLI: convert a JSON graph file into SES text."""

import argparse
import sys
from importlib.metadata import version as get_version, PackageNotFoundError
from pathlib import Path

from .codes import ExitCode


def build_parser() -> argparse.ArgumentParser:
    try:
        sesemit_version = get_version("sesemit")
    except PackageNotFoundError:
        sesemit_version = "dev"

    parser = argparse.ArgumentParser(
        prog="sesemit",
        description="sesemit: Convert a loosely-structured JSON graph into SES sentences"
    )
    parser.add_argument("--version", action="version", version=f"sesemit {sesemit_version}")
    parser.add_argument(
        "input",
        type=Path,
        help="Path to the input JSON document"
    )
    parser.add_argument(
        "output",
        type=Path,
        help="Path to the SES file to write (parent directories are created)"
    )
    parser.add_argument(
        "--overwrite",
        action="store_true",
        help="Accepted for compatibility; existing output is always overwritten."
    )
    parser.add_argument(
        "--graph-out",
        dest="graph_out",
        type=Path,
        default=None,
        help="Also write the extracted canonical graph as JSON to this path"
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress all non-error output."
    )
    return parser


def main(argv=None):
    """Main CLI entry point for sesemit."""
    parser = build_parser()
    # argparse exits with ExitCode.USAGE (2) when positionals are missing
    args = parser.parse_args(argv)

    try:
        from .api import convert_file

        result = convert_file(
            args.input,
            args.output,
            overwrite=args.overwrite,
            graph_path=args.graph_out,
        )

        if not args.quiet:
            print(f"Wrote SES: {result.output_path}")
            if result.graph_path:
                print(f"  Graph: {result.graph_path}")
            print(f"  Scopes: {result.scope_count}, flows: {result.flow_count}")
        sys.exit(ExitCode.OK)
    except FileNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(ExitCode.FAILURE)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(ExitCode.FAILURE)
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(ExitCode.FAILURE)
    except Exception as e:
        print(f"Unexpected error: {e}", file=sys.stderr)
        import traceback
        traceback.print_exc()
        sys.exit(ExitCode.FAILURE)


if __name__ == "__main__":
    main()
