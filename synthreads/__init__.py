"""Random paired-end FASTQ read synthesis."""

from __future__ import annotations

from .generator import FastqGenerator, PairedRecord
from .pipeline import InvalidParameterError, generate_paired_fastq, output_paths
from .writer import PairedFastqWriter, open_paired_writer

__version__ = "0.1.0"

__all__ = [
    "FastqGenerator",
    "InvalidParameterError",
    "PairedFastqWriter",
    "PairedRecord",
    "generate_paired_fastq",
    "open_paired_writer",
    "output_paths",
]
