"""Command line inspection of PCK archives."""

import argparse
import os
import sys

from .engine import PckEngine
from .stream import PckStream

__all__ = ["main"]


def _parser():
    parser = argparse.ArgumentParser(
        prog="pwkit", description="List or extract the files of a PCK archive."
    )
    parser.add_argument("archive", help="path of the .pck file")
    parser.add_argument("--entry", help="show only the entry with this archive path")
    parser.add_argument("--extract", metavar="FILE", help="write the selected entry's contents to FILE")
    return parser


def main(argv=None):
    """Print the file count and table of an archive; optionally extract one entry."""
    args = _parser().parse_args(argv)
    if args.extract and not args.entry:
        print("pwkit: --extract needs --entry", file=sys.stderr)
        return 2
    if not os.path.isfile(args.archive):
        print(f"pwkit: no such archive: {args.archive}", file=sys.stderr)
        return 1

    engine = PckEngine()
    with PckStream(args.archive) as stream:
        entries = engine.read_entries(stream)
        print(f"files: {engine.files_count(stream)} entries: {len(entries)}")
        if args.entry:
            entries = [entry for entry in entries if entry.path == args.entry]
            if not entries:
                print(f"pwkit: no entry {args.entry}", file=sys.stderr)
                return 1
        for entry in entries:
            print(f"{entry.path}\t{entry.offset}\t{entry.size}\t{entry.compressed_size}")
        if args.extract:
            with open(args.extract, "wb") as out:
                out.write(engine.read_file(stream, entries[0]))
    return 0


if __name__ == "__main__":
    sys.exit(main())