import re
from dataclasses import dataclass
from pathlib import Path

import pandas as pd
from Bio import SeqIO
from Bio.Seq import Seq
from Bio.SeqRecord import SeqRecord

from .config import COLUMN_SETS
from .records import SequenceEntry

NON_ASCII = re.compile(r"[^\x00-\x7f]")


@dataclass
class MergedRow:
    short_name: str
    first: SequenceEntry
    second: SequenceEntry

    def as_dict(self) -> dict:
        return {
            "ShortName": self.short_name,
            "Organism1": self.first.organism,
            "PERCENTIDENT1": self.first.hit_score,
            "FILE1": self.first.record,
            "Organism2": self.second.organism,
            "PERCENTIDENT2": self.second.hit_score,
            "FILE2": self.second.record,
        }


def join_maps(first: dict, second: dict) -> list[MergedRow]:
    """Inner join of two organism maps; row order follows `first`."""
    rows = []
    for name, entry in first.items():
        other = second.get(name)
        if other is not None:
            rows.append(MergedRow(name, entry, other))
    return rows


def rows_to_frame(rows, columns: str = "full", sort: bool = False) -> pd.DataFrame:
    if columns not in COLUMN_SETS:
        raise ValueError(f"unknown column set {columns!r}; expected one of {sorted(COLUMN_SETS)}")
    cols = COLUMN_SETS[columns]
    df = pd.DataFrame([r.as_dict() for r in rows], columns=COLUMN_SETS["full"])[cols]
    if sort:
        df = df.sort_values("ShortName", kind="stable").reset_index(drop=True)
    return df


def write_table(rows, path, columns: str = "full", sort: bool = False, sep: str = ",") -> int:
    df = rows_to_frame(rows, columns=columns, sort=sort)
    Path(path).parent.mkdir(parents=True, exist_ok=True)
    # undecodable input bytes were read as surrogates; write them back unchanged
    df.to_csv(path, sep=sep, index=False, encoding="utf-8", errors="surrogateescape")
    return len(df)


def _fasta_id(name: str, side: int, entry: SequenceEntry) -> str:
    # {organism}|{side}|{acc}, no whitespace so downstream aligners keep the id intact
    label = "_".join(name.split()) or "unnamed"
    return f"{label}|{side}|{entry.accession or 'NA'}"


def entry_to_seqrecord(entry: SequenceEntry, rec_id: str) -> SeqRecord:
    # Seq only holds ASCII residues
    seq = NON_ASCII.sub("X", entry.sequence.strip())
    return SeqRecord(Seq(seq), id=rec_id, description=entry.organism)


def write_fasta(recs, path) -> int:
    Path(path).parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8", errors="surrogateescape") as fh:
        return SeqIO.write(recs, fh, "fasta")


def write_pairs_fasta(rows, path) -> int:
    """Write both surviving records of every merged organism as FASTA."""
    recs = []
    for r in rows:
        recs.append(entry_to_seqrecord(r.first, _fasta_id(r.short_name, 1, r.first)))
        recs.append(entry_to_seqrecord(r.second, _fasta_id(r.short_name, 2, r.second)))
    return write_fasta(recs, path)
