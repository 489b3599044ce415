"""Driver loop: generate N paired records and stream them to <prefix>_R1/_R2."""

from __future__ import annotations

import logging
import pathlib
import random
from typing import Optional, Tuple

from .generator import FastqGenerator
from .writer import open_paired_writer

logger = logging.getLogger(__name__)


class InvalidParameterError(ValueError):
    pass


def output_paths(prefix: str) -> Tuple[pathlib.Path, pathlib.Path]:
    return pathlib.Path(f"{prefix}_R1.fastq"), pathlib.Path(f"{prefix}_R2.fastq")


def validate_parameters(num_reads: int, read_length: int) -> None:
    if num_reads <= 0 or read_length <= 0:
        raise InvalidParameterError("Number of reads and read length must be positive.")


def generate_paired_fastq(
    num_reads: int,
    read_length: int,
    output_prefix: str,
    rng: Optional[random.Random] = None,
) -> Tuple[pathlib.Path, pathlib.Path]:
    """Write `num_reads` paired records and return the (R1, R2) paths.

    Parameters are checked before either file is created. Records are
    generated and written one at a time in index order; OSError from opening
    or writing the sinks propagates unchanged.
    """
    validate_parameters(num_reads, read_length)
    if rng is None:
        rng = random.Random()

    generator = FastqGenerator(read_length)
    r1_path, r2_path = output_paths(output_prefix)
    logger.debug("Writing %s and %s with %r", r1_path, r2_path, generator)

    with open_paired_writer(r1_path, r2_path) as writer:
        for i in range(num_reads):
            writer.write(generator.generate(i, rng))

    return r1_path, r2_path
