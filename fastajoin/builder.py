from collections import Counter
from pathlib import Path

from .config import MIN_IDENT, QUALITY_MARKERS, SELECT_POLICIES
from .records import (QUALIFIER, SequenceEntry, canonical_name, extract_accession,
                      extract_annotation, split_records)
from .scores import read_hit_scores


def is_low_quality(record: str) -> bool:
    return any(m in record for m in QUALITY_MARKERS)


# choose "best" record per organism: highest hit score, or longest payload;
# strict comparison so the first record seen wins ties
def _better(new: SequenceEntry, cur: SequenceEntry, select: str) -> bool:
    if select == "length":
        return len(new.sequence) > len(cur.sequence)
    return new.hit_score > cur.hit_score


def build_map(records, scores: dict[str, float], min_ident: float | None = MIN_IDENT,
              select: str = "score", drop_unnamed: bool = False, stop=QUALIFIER):
    """Keep the best record per canonical organism name.

    Arguments:
        records: raw record texts, as returned by split_records().
        scores: accession -> percent identity; missing accessions score 0.0.
        min_ident: records scoring below this are dropped; None disables the floor.
        select: "score" (strictly higher hit score wins) or "length"
            (strictly longer sequence wins).
        drop_unnamed: skip records whose canonical name is empty instead of
            collecting them under the "" key.
        stop: compiled qualifier pattern handed to canonical_name().

    Returns:
        (best, skipped) where best maps canonical name -> SequenceEntry and
        skipped counts dropped records by reason.
    """
    if select not in SELECT_POLICIES:
        raise ValueError(f"unknown select policy {select!r}; expected one of {SELECT_POLICIES}")

    best = {}
    skipped = Counter()
    for rec in records:
        if is_low_quality(rec):
            skipped["quality"] += 1
            continue
        score = scores.get(extract_accession(rec), 0.0)
        if min_ident is not None and score < min_ident:
            skipped["below_threshold"] += 1
            continue
        annotation = extract_annotation(rec)
        name = canonical_name(annotation, stop)
        parts = rec.split("]", 1)
        if len(parts) < 2:
            skipped["no_payload"] += 1
            continue
        if drop_unnamed and not name:
            skipped["unnamed"] += 1
            continue

        entry = SequenceEntry(name, annotation or "", rec, score, parts[1])
        cur = best.get(name)
        if cur is None or _better(entry, cur, select):
            best[name] = entry
    return best, skipped


def build_map_from_files(fasta_path, score_path, **opts):
    """Read one FASTA + score table pair and build its organism map.

    The score table is loaded first so a corrupt table aborts before the
    (larger) FASTA is read.
    """
    scores = read_hit_scores(score_path)
    text = Path(fasta_path).read_text(encoding="utf-8", errors="surrogateescape")
    return build_map(split_records(text), scores, **opts)
