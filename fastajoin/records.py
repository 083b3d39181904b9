"""
Record model for bracket-annotated FASTA dumps.

A record looks like (after line joining):
  XP_012345.1 hypothetical protein [Escherichia coli K-12]MKVLAAGIV...
accession = XP_012345.1
annotation = "Escherichia coli K-12"
canonical name = "Escherichia coli"
"""
import re
from dataclasses import dataclass

# a word that ends the binomial: any capital letter, or a lone digit
QUALIFIER = re.compile(r".*[A-Z].*|[0-9]")


@dataclass
class SequenceEntry:
    canonical_name: str
    organism: str        # full bracket annotation ("" when absent)
    record: str          # raw record text, without the leading '>'
    hit_score: float
    sequence: str        # everything after the first ']'

    @property
    def accession(self) -> str:
        return extract_accession(self.record)


def split_records(text: str) -> list[str]:
    joined = text.replace("\r\n", "").replace("\n", "")
    return [r for r in joined.split(">") if r]


def extract_accession(record: str) -> str:
    parts = record.split(None, 1)
    return parts[0] if parts else ""


def extract_annotation(record: str) -> str | None:
    s = record.find("[")
    if s == -1:
        return None
    e = record.rfind("]")
    if e < s:
        return None
    return record[s + 1:e]


def canonical_name(annotation: str | None, stop: re.Pattern = QUALIFIER) -> str:
    if not annotation:
        return ""
    words = annotation.split(" ")
    name = words[0]
    for w in words[1:]:
        if stop.fullmatch(w):
            break
        name += " " + w
    return name
