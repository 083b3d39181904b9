from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from collections import Counter

from .builder import build_map, build_map_from_files
from .config import MergeConfig
from .merge import join_maps, write_pairs_fasta, write_table
from .records import split_records
from .scores import parse_hit_scores


@dataclass
class MergeResult:
    rows: list
    first_kept: int
    second_kept: int
    first_skipped: Counter = field(default_factory=Counter)
    second_skipped: Counter = field(default_factory=Counter)


def fork_join(fn, first_args, second_args, **opts):
    """Run fn on both argument tuples concurrently and wait for both.

    An exception raised in either worker is re-raised here; leaving the
    executor block still joins the other worker.
    """
    with ThreadPoolExecutor(max_workers=2) as ex:
        f1 = ex.submit(fn, *first_args, **opts)
        f2 = ex.submit(fn, *second_args, **opts)
        return f1.result(), f2.result()


def build_both(cfg: MergeConfig):
    return fork_join(build_map_from_files,
                     (cfg.first, cfg.first_scores),
                     (cfg.second, cfg.second_scores),
                     **cfg.build_options())


def build_map_from_text(fasta_text: str, score_text: str, source: str = "<text>", **opts):
    scores = parse_hit_scores(score_text, source=source)
    return build_map(split_records(fasta_text), scores, **opts)


def build_both_texts(first, second, **opts):
    """Same as build_both for in-memory inputs.

    first, second: (fasta_text, score_text, score_source) tuples.
    """
    return fork_join(build_map_from_text, first, second, **opts)


def merge(cfg: MergeConfig) -> MergeResult:
    (first, s1), (second, s2) = build_both(cfg)
    return MergeResult(join_maps(first, second), len(first), len(second), s1, s2)


def run(cfg: MergeConfig) -> MergeResult:
    """Build, join and write; nothing is written unless both sides loaded."""
    res = merge(cfg)
    write_table(res.rows, cfg.out, columns=cfg.columns, sort=cfg.sort, sep=cfg.sep)
    if cfg.pairs_fasta:
        write_pairs_fasta(res.rows, cfg.pairs_fasta)
    return res
