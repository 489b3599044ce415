import io

from synthreads.generator import PairedRecord
from synthreads.writer import PairedFastqWriter, format_fastq_block, open_paired_writer, read_fastq


def _record(index=0):
    return PairedRecord(
        id=f"READ_{index:06d}",
        forward_sequence="AACG",
        mate_sequence="CGTT",
        forward_quality="!#5I",
        mate_quality="I5#!",
    )


def test_format_fastq_block():
    assert format_fastq_block("READ_000001", 2, "ACGT", "IIII") == "@READ_000001 /2\nACGT\n+\nIIII\n"


def test_writer_appends_one_block_per_sink():
    r1, r2 = io.StringIO(), io.StringIO()
    writer = PairedFastqWriter(r1, r2)
    writer.write(_record(0))
    writer.write(_record(1))

    assert writer.records_written == 2
    assert r1.getvalue() == (
        "@READ_000000 /1\nAACG\n+\n!#5I\n"
        "@READ_000001 /1\nAACG\n+\n!#5I\n"
    )
    assert r2.getvalue() == (
        "@READ_000000 /2\nCGTT\n+\nI5#!\n"
        "@READ_000001 /2\nCGTT\n+\nI5#!\n"
    )


def test_open_paired_writer_round_trips_through_seqio(tmp_path):
    r1_path, r2_path = tmp_path / "x_R1.fastq", tmp_path / "x_R2.fastq"
    with open_paired_writer(r1_path, r2_path) as writer:
        writer.write(_record(0))

    (rec1,) = list(read_fastq(r1_path))
    (rec2,) = list(read_fastq(r2_path))
    assert rec1.id == rec2.id == "READ_000000"
    assert rec1.description == "READ_000000 /1"
    assert str(rec1.seq) == "AACG"
    assert str(rec2.seq) == "CGTT"
    assert rec1.letter_annotations["phred_quality"] == [0, 2, 20, 40]
    assert rec2.letter_annotations["phred_quality"] == [40, 20, 2, 0]
