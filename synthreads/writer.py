"""FASTQ serialization for paired records, plus a Biopython-based reader."""

from __future__ import annotations

import contextlib
import logging
import pathlib
from typing import Iterator, TextIO, Union

from Bio import SeqIO
from Bio.SeqRecord import SeqRecord

from .generator import PairedRecord

logger = logging.getLogger(__name__)

PathLike = Union[str, pathlib.Path]


def format_fastq_block(read_id: str, mate_number: int, sequence: str, quality: str) -> str:
    return f"@{read_id} /{mate_number}\n{sequence}\n+\n{quality}\n"


class PairedFastqWriter:
    """Append each paired record to two sinks in lockstep.

    The Nth block in the R1 sink and the Nth block in the R2 sink always
    describe the same record.
    """

    def __init__(self, r1_handle: TextIO, r2_handle: TextIO):
        self.r1_handle = r1_handle
        self.r2_handle = r2_handle
        self.records_written = 0

    def write(self, record: PairedRecord) -> None:
        self.r1_handle.write(
            format_fastq_block(record.id, 1, record.forward_sequence, record.forward_quality)
        )
        self.r2_handle.write(
            format_fastq_block(record.id, 2, record.mate_sequence, record.mate_quality)
        )
        self.records_written += 1

    def flush(self) -> None:
        self.r1_handle.flush()
        self.r2_handle.flush()


@contextlib.contextmanager
def open_paired_writer(r1_path: PathLike, r2_path: PathLike) -> Iterator[PairedFastqWriter]:
    """Open both sinks once for the whole run.

    Files are closed on exit either way; anything already written on an error
    path stays on disk.
    """
    with open(r1_path, "w", encoding="ascii", newline="\n") as r1, \
         open(r2_path, "w", encoding="ascii", newline="\n") as r2:
        writer = PairedFastqWriter(r1, r2)
        yield writer
        writer.flush()
        logger.debug("Flushed %d paired records to %s and %s", writer.records_written, r1_path, r2_path)


def read_fastq(path: PathLike) -> Iterator[SeqRecord]:
    with open(path, "r", encoding="ascii") as handle:
        yield from SeqIO.parse(handle, "fastq")
