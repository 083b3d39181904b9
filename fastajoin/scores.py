"""
Load BLAST-style hit-score tables.

Expected rows (comma separated, extra columns ignored):
  query,accession,percent_identity[,...]
Rows with fewer than three fields are skipped. A percent identity that is not
a number aborts the load, since a corrupt table would silently zero scores.
"""
from pathlib import Path


class ScoreTableError(ValueError):
    def __init__(self, lineno: int, value: str, source: str = "<text>"):
        self.lineno = lineno
        self.value = value
        self.source = source
        super().__init__(f"{source}:{lineno}: percent identity {value!r} is not a number")


def parse_hit_scores(text: str, source: str = "<text>") -> dict[str, float]:
    scores = {}
    for lineno, line in enumerate(text.splitlines(), start=1):
        if not line.strip():
            continue
        fields = line.split(",")
        if len(fields) < 3:
            continue
        try:
            scores[fields[1]] = float(fields[2])
        except ValueError:
            raise ScoreTableError(lineno, fields[2], source) from None
    return scores


def read_hit_scores(path) -> dict[str, float]:
    p = Path(path)
    return parse_hit_scores(p.read_text(encoding="utf-8", errors="surrogateescape"), source=str(p))
