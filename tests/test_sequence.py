from synthreads.sequence import BASES, complement, reverse_complement, reverse_quality


def test_complement_pairs():
    assert [complement(b) for b in "ATCG"] == ["T", "A", "G", "C"]


def test_complement_unknown_symbol_is_identity():
    assert complement("N") == "N"
    assert reverse_complement("ANx") == "xNT"


def test_reverse_complement():
    assert reverse_complement("AACG") == "CGTT"
    assert reverse_complement("") == ""


def test_reverse_complement_is_involution():
    seq = "GATTACACCGTA"
    assert reverse_complement(reverse_complement(seq)) == seq


def test_reverse_quality_does_not_complement():
    qual = "!#I5"
    assert reverse_quality(qual) == "5I#!"
    assert reverse_quality(reverse_quality(qual)) == qual


def test_alphabet():
    assert sorted(BASES) == ["A", "C", "G", "T"]
