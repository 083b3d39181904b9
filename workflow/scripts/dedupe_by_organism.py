#!/usr/bin/env python3
import argparse, sys

from fastajoin import build_map_from_files
from fastajoin.config import MIN_IDENT, SELECT_POLICIES
from fastajoin.merge import entry_to_seqrecord, write_fasta

ap = argparse.ArgumentParser(description="Keep the best record per organism of one FASTA dump.")
ap.add_argument("--in", dest="inp", required=True)     # bracket-annotated FASTA
ap.add_argument("--scores", required=True)             # hit table: query,acc,pident
ap.add_argument("--out", required=True)                # FASTA: {organism}|{acc}
ap.add_argument("--min-ident", type=float, default=MIN_IDENT)
ap.add_argument("--no-threshold", action="store_true")
ap.add_argument("--select", default="score", choices=SELECT_POLICIES)
args = ap.parse_args()

best, skipped = build_map_from_files(
    args.inp, args.scores,
    min_ident=None if args.no_threshold else args.min_ident,
    select=args.select,
)

out = []
for name in sorted(best):
    e = best[name]
    label = "_".join(name.split()) or "unnamed"
    out.append(entry_to_seqrecord(e, f"{label}|{e.accession or 'NA'}"))

write_fasta(out, args.out)
print(f"[dedupe] kept {len(out)} organisms from {args.inp}; skipped {sum(skipped.values())}", file=sys.stderr)
