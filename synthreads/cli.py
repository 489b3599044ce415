#!/usr/bin/env python3
"""
synthreads

Generate random paired-end FASTQ files.

Usage:
    synthreads [-o PREFIX] [-n NUM_READS] [-l READ_LENGTH]

Example:
    synthreads -o synthetic_reads -n 1000 -l 150

Writes PREFIX_R1.fastq (forward reads, "/1") and PREFIX_R2.fastq (reverse
complemented mates, "/2").
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from . import __version__
from .pipeline import InvalidParameterError, generate_paired_fastq, validate_parameters

DEFAULT_PREFIX = "synthetic_reads"
DEFAULT_NUM_READS = 1000
DEFAULT_READ_LENGTH = 150


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="synthreads",
        description="A simple tool to generate random paired-end fastq files.",
    )
    parser.add_argument(
        "-o",
        "--outfile",
        default=DEFAULT_PREFIX,
        help=f"Output file prefix; writes <prefix>_R1.fastq and <prefix>_R2.fastq (default: {DEFAULT_PREFIX}).",
    )
    parser.add_argument(
        "-n",
        type=int,
        default=DEFAULT_NUM_READS,
        dest="num_reads",
        help=f"Number of read pairs to generate (default: {DEFAULT_NUM_READS}).",
    )
    parser.add_argument(
        "-l",
        "--read-len",
        type=int,
        default=DEFAULT_READ_LENGTH,
        dest="read_length",
        help=f"Length of each read in bases (default: {DEFAULT_READ_LENGTH}).",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')
    args = parse_args(argv)

    try:
        validate_parameters(args.num_reads, args.read_length)
    except InvalidParameterError as exc:
        raise SystemExit(str(exc))

    print(f"Starting generation of {args.num_reads} paired reads (Length: {args.read_length})")
    try:
        generate_paired_fastq(args.num_reads, args.read_length, args.outfile)
    except OSError as e:
        logging.error(f"Error writing paired FASTQ files with prefix {args.outfile}: {e}")
        return 1

    print(f"Wrote {args.num_reads} paired reads of length {args.read_length} to {args.outfile}_R[12].fastq")
    return 0


if __name__ == "__main__":
    sys.exit(main())
