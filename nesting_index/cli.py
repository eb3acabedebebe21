"""
Nesting Index CLI
=================

Computes the nesting index of double occurrence words given on the command
line or listed in a text file.

USAGE:
    nesting-index 123321                 # single word
    nesting-index 1,2,3,3,2,1            # delimited letters
    nesting-index --path 121323          # also print a reduction path
    nesting-index -t words.txt [out.txt] # every word of a file
    nesting-index -c words.txt           # frequency of each nesting index
    nesting-index -i 123321              # cyclically equivalent words
"""
import argparse
import sys
from typing import List, Optional

from .batch import (
    BatchConfig,
    evaluate_words,
    format_results,
    format_tally,
    read_words,
    tally,
    write_results,
)
from .constants import NOT_DOW_LABEL
from .engine import EngineConfig, NestingIndexEngine, reduction_path
from .errors import MalformedTokenError, NonDOWError, ResourceExhaustionError
from .isomorphism import classify_isomorphisms
from .parsing import format_word, parse_word


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="nesting-index",
        description="Nesting index of double occurrence words (DOWs).",
        epilog=(
            "WORD is a digit string such as 123321 or a delimited list such "
            "as 1,2,3,3,2,1 over the natural numbers."
        ),
    )
    parser.add_argument("word", nargs="?", metavar="WORD",
                        help="double occurrence word")
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument("-t", "--text", nargs="+", metavar="FILE",
                      help="INFILE [OUTFILE]: whitespace-delimited words from INFILE")
    mode.add_argument("-c", "--count", metavar="INFILE",
                      help="frequency of recognized nesting indices in INFILE")
    mode.add_argument("-i", "--isos", metavar="WORD",
                      help="nesting index of every cyclically equivalent word")
    parser.add_argument("--path", action="store_true",
                        help="print a shortest reduction path (single word)")
    parser.add_argument("--workers", type=int, default=None,
                        help="evaluate file words in parallel with N workers")
    parser.add_argument("--processes", action="store_true",
                        help="use processes instead of threads for --workers")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="print search progress per level")
    return parser


# =============================================================================
# Commands
# =============================================================================

def cmd_word(args, engine_config: EngineConfig) -> int:
    """Nesting index of a single word."""
    try:
        word = parse_word(args.word)
    except MalformedTokenError as exc:
        print(str(exc), file=sys.stderr)
        return 1

    label = format_word(word)
    try:
        if args.path:
            result = reduction_path(word, engine_config)
            print(f"{label}: {result.index}")
            if result.history:
                print(result.describe())
        else:
            index = NestingIndexEngine(engine_config).nesting_index(word)
            print(f"{label}: {index}")
    except NonDOWError:
        print(f"{label}: {NOT_DOW_LABEL}")
        return 1
    except ResourceExhaustionError as exc:
        print(f"{label}: error: {exc}", file=sys.stderr)
        return 1
    return 0


def cmd_isos(args, engine_config: EngineConfig) -> int:
    """Nesting index of every word cyclically equivalent to the given one."""
    try:
        word = parse_word(args.isos)
    except MalformedTokenError as exc:
        print(str(exc), file=sys.stderr)
        return 1

    try:
        members = classify_isomorphisms(word, engine_config)
    except NonDOWError:
        print(f"{format_word(word)}: {NOT_DOW_LABEL}")
        return 1
    except ResourceExhaustionError as exc:
        print(f"{format_word(word)}: error: {exc}", file=sys.stderr)
        return 1

    for member in members:
        print(f"{format_word(member.word)}: {member.nesting_index}")
    print(f"Circular nesting index: {min(m.nesting_index for m in members)}")
    return 0


def cmd_text(args, batch_config: BatchConfig) -> int:
    """Nesting index of every word in a file, to stdout or an output file."""
    infile = args.text[0]
    outfile = args.text[1] if len(args.text) > 1 else None
    try:
        results = evaluate_words(read_words(infile), batch_config)
    except OSError:
        print(f"Couldn't open file: {infile}", file=sys.stderr)
        return 1

    if outfile is None:
        if results:
            print(format_results(results))
        return 0
    try:
        write_results(results, outfile)
    except OSError:
        print(f"Couldn't open file: {outfile}", file=sys.stderr)
        return 1
    return 0


def cmd_count(args, batch_config: BatchConfig) -> int:
    """Frequency of each nesting index over the words of a file."""
    try:
        results = evaluate_words(read_words(args.count), batch_config)
    except OSError:
        print(f"Couldn't open file: {args.count}", file=sys.stderr)
        return 1

    counts = tally(results)
    if counts:
        print(format_tally(counts))
    return 0


# =============================================================================
# Entry point
# =============================================================================

def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    modes = [args.word is not None, args.text is not None,
             args.count is not None, args.isos is not None]
    if sum(modes) == 0:
        parser.print_help()
        return 0
    if sum(modes) > 1:
        parser.error("give either WORD or one of -t, -c, -i")
    if args.text is not None and len(args.text) > 2:
        parser.error("-t takes INFILE and an optional OUTFILE")
    if args.workers is not None and args.workers < 1:
        parser.error("--workers must be >= 1")

    engine_config = EngineConfig(verbose=args.verbose)
    batch_config = BatchConfig(
        engine=engine_config,
        parallel=args.workers is not None and args.workers > 1,
        max_workers=args.workers,
        use_processes=args.processes,
    )

    if args.text is not None:
        return cmd_text(args, batch_config)
    if args.count is not None:
        return cmd_count(args, batch_config)
    if args.isos is not None:
        return cmd_isos(args, engine_config)
    return cmd_word(args, engine_config)


if __name__ == "__main__":
    sys.exit(main())
