#!/usr/bin/env python3
"""
generator.py

Sampling model for synthetic paired-end reads. Each call to
`FastqGenerator.generate` produces one independent `PairedRecord`: a uniformly
random forward read, its reverse complement as the mate, and uniformly random
Phred+33 qualities (reversed for the mate).

The random source is passed in explicitly. Per record it is consumed in a
fixed order, all sequence draws first and all quality draws second, so a
seeded source always reproduces the same output stream.
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Tuple

from .sequence import BASES, reverse_complement, reverse_quality

PHRED_MIN = 33
PHRED_MAX = 74  # exclusive
READ_ID_PREFIX = "READ_"


@dataclass(frozen=True)
class PairedRecord:
    id: str
    forward_sequence: str
    mate_sequence: str
    forward_quality: str
    mate_quality: str


def format_read_id(index: int) -> str:
    return f"{READ_ID_PREFIX}{index:06d}"


class FastqGenerator:
    def __init__(self, read_length: int):
        self.read_length = read_length
        self.bases = BASES
        self.quality_range: Tuple[int, int] = (PHRED_MIN, PHRED_MAX)

    def __repr__(self) -> str:
        return f"FastqGenerator(read_length={self.read_length})"

    def sample_sequence(self, rng: random.Random) -> str:
        return "".join(rng.choice(self.bases) for _ in range(self.read_length))

    def sample_quality(self, rng: random.Random) -> str:
        low, high = self.quality_range
        return "".join(chr(rng.randrange(low, high)) for _ in range(self.read_length))

    def generate(self, index: int, rng: random.Random) -> PairedRecord:
        """Return the paired record for position `index` of the output stream."""
        seq = self.sample_sequence(rng)
        qual = self.sample_quality(rng)
        return PairedRecord(
            id=format_read_id(index),
            forward_sequence=seq,
            mate_sequence=reverse_complement(seq),
            forward_quality=qual,
            mate_quality=reverse_quality(qual),
        )
