from __future__ import annotations

BASES = "ATCG"

# Symbols outside the alphabet are left untouched by str.translate.
_COMPLEMENT = str.maketrans("ATCG", "TAGC")


def complement(base: str) -> str:
    return base.translate(_COMPLEMENT)


def reverse_complement(seq: str) -> str:
    return seq[::-1].translate(_COMPLEMENT)


def reverse_quality(qual: str) -> str:
    # Qualities have no complement; R2 simply reads R1's scores back-to-front.
    return qual[::-1]
