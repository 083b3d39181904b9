#!/usr/bin/env python3
"""
Join two bracket-annotated FASTA dumps on organism name.

Examples
--------
fastajoin \
  --first runA.fasta --first-scores runA.hits.csv \
  --second runB.fasta --second-scores runB.hits.csv \
  --out merged.csv --sort
"""
import argparse
import sys

from .config import COLUMN_SETS, MIN_IDENT, SELECT_POLICIES, MergeConfig
from .pipeline import run
from .scores import ScoreTableError


def separator(value: str) -> str:
    # shells hand over "\t" literally
    sep = {"\\t": "\t", "tab": "\t"}.get(value, value)
    if len(sep) != 1:
        raise argparse.ArgumentTypeError(f"delimiter must be a single character, got {value!r}")
    return sep


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="fastajoin",
        description="Keep the best record per organism in each FASTA and join organisms found in both.",
    )
    ap.add_argument("--first", required=True, help="first FASTA file")
    ap.add_argument("--first-scores", required=True, help="hit table for --first (query,acc,pident)")
    ap.add_argument("--second", required=True, help="second FASTA file")
    ap.add_argument("--second-scores", required=True, help="hit table for --second (query,acc,pident)")
    ap.add_argument("--out", required=True, help="output table")
    ap.add_argument("--min-ident", type=float, default=MIN_IDENT,
                    help=f"drop records below this percent identity (default: {MIN_IDENT})")
    ap.add_argument("--no-threshold", action="store_true", help="keep records regardless of identity")
    ap.add_argument("--select", default="score", choices=SELECT_POLICIES,
                    help="pick duplicates by highest hit score or longest sequence")
    ap.add_argument("--columns", default="full", choices=sorted(COLUMN_SETS))
    ap.add_argument("--sort", action="store_true", help="sort rows by ShortName")
    ap.add_argument("--sep", default=",", type=separator,
                    help="output delimiter, one character or '\\t' (default: ',')")
    ap.add_argument("--drop-unnamed", action="store_true",
                    help="skip records without an [organism] annotation")
    ap.add_argument("--pairs-fasta", default=None, help="also write merged records as FASTA")
    return ap


def _fmt_skipped(skipped) -> str:
    if not skipped:
        return "none"
    return ", ".join(f"{k}={v}" for k, v in sorted(skipped.items()))


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    cfg = MergeConfig.from_args(args)

    print(f"[fastajoin] FIRST FILE={cfg.first} SECOND FILE={cfg.second}", file=sys.stderr)
    try:
        res = run(cfg)
    except ScoreTableError as e:
        print(f"[error] corrupt score table: {e}", file=sys.stderr)
        return 2
    except OSError as e:
        print(f"[error] {e}", file=sys.stderr)
        return 2

    print(f"[fastajoin] first: kept {res.first_kept} organisms; skipped {_fmt_skipped(res.first_skipped)}",
          file=sys.stderr)
    print(f"[fastajoin] second: kept {res.second_kept} organisms; skipped {_fmt_skipped(res.second_skipped)}",
          file=sys.stderr)
    print(f"[done] {len(res.rows)} shared organisms -> {cfg.out}", file=sys.stderr)
    if cfg.pairs_fasta:
        print(f"[done] paired records -> {cfg.pairs_fasta}", file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())
