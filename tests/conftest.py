import pytest


def fasta_text(*records):
    """records: (accession, description, annotation, sequence); annotation None -> no brackets."""
    out = []
    for acc, desc, ann, seq in records:
        head = f"{acc} {desc}"
        if ann is not None:
            head += f" [{ann}]"
        # wrap the sequence over two lines like a real dump
        half = len(seq) // 2
        out.append(f">{head}\n{seq[:half]}\n{seq[half:]}\n")
    return "".join(out)


def scores_text(pairs):
    return "".join(f"q,{acc},{score}\n" for acc, score in pairs)


@pytest.fixture
def write_side(tmp_path):
    """Write a FASTA + score table pair and return their paths."""
    def _write(prefix, records, scores):
        fa = tmp_path / f"{prefix}.fasta"
        sc = tmp_path / f"{prefix}.hits.csv"
        fa.write_text(fasta_text(*records))
        sc.write_text(scores_text(scores))
        return fa, sc
    return _write
