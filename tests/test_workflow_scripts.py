import runpy
import sys
from pathlib import Path

from Bio import SeqIO

SCRIPTS = Path(__file__).resolve().parents[1] / "workflow" / "scripts"


def test_dedupe_by_organism(tmp_path, write_side, monkeypatch, capsys):
    fa, sc = write_side("a", [
        ("a1", "prot", "Homo sapiens", "MKVL"),
        ("a2", "prot", "Homo sapiens 2", "MKVLAA"),
        ("a3", "LOW QUALITY PROTEIN", "Mus musculus", "MK"),
        ("a4", "prot", "Danio rerio AB", "MKV"),
    ], [("a1", 60), ("a2", 95), ("a3", 99), ("a4", 70)])
    out = tmp_path / "best" / "a.best.fasta"
    monkeypatch.setattr(sys, "argv", ["dedupe_by_organism.py", "--in", str(fa),
                                      "--scores", str(sc), "--out", str(out)])
    runpy.run_path(str(SCRIPTS / "dedupe_by_organism.py"), run_name="__main__")

    recs = list(SeqIO.parse(out, "fasta"))
    assert [r.id for r in recs] == ["Danio_rerio|a4", "Homo_sapiens|a2"]
    assert str(recs[1].seq) == "MKVLAA"
    assert "[dedupe] kept 2 organisms" in capsys.readouterr().err
