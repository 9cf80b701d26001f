"""Command line entry: read an SWP file and optionally write its surfaces as OBJ."""

from __future__ import annotations

import argparse
import sys

from .parse import ANONYMOUS, SwpParseError, SwpScene, parse_swp
from .surf import write_obj


def load_objects(path: str, prefix: str | None = None) -> SwpScene:
    """Parse ``path``; if ``prefix`` is given write ``PREFIX_NAME.obj`` per named surface."""
    with open(path, encoding="utf-8") as stream:
        scene = parse_swp(stream)

    if prefix is not None:
        for name, surface in zip(scene.surface_names, scene.surfaces):
            if name == ANONYMOUS:
                continue
            filename = f"{prefix}_{name}.obj"
            try:
                with open(filename, "w", encoding="utf-8") as out:
                    write_obj(out, surface)
            except OSError:
                print(f"could not open file {filename}, skipping", file=sys.stderr)
                continue
            print(f"wrote {filename}", file=sys.stderr)
    return scene


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="sweepkit",
        description="Build curves and swept surfaces from an SWP file.",
    )
    parser.add_argument("swpfile", help="SWP file to read")
    parser.add_argument(
        "objprefix", nargs="?", default=None, help="prefix for OBJ output files"
    )
    args = parser.parse_args(argv)

    try:
        scene = load_objects(args.swpfile, args.objprefix)
    except FileNotFoundError:
        print(f"{args.swpfile} not found", file=sys.stderr)
        return 1
    except OSError as err:
        print(f"{args.swpfile}: {err.strerror}", file=sys.stderr)
        return 1
    except SwpParseError as err:
        print(f"error in file format: {err}", file=sys.stderr)
        return 1

    print(
        f"{len(scene.curves)} curves, {len(scene.surfaces)} surfaces",
        file=sys.stderr,
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())