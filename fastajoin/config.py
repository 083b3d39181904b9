from dataclasses import dataclass
from pathlib import Path
from typing import Optional

# ========= CONFIG =========
QUALITY_MARKERS = ("LOW QUALITY PROTEIN", "partial")   # case-sensitive substring rejects
MIN_IDENT       = 50.0                                 # percent identity floor
SELECT_POLICIES = ("score", "length")                  # how a better duplicate is chosen
COLUMN_SETS = {
    "full":    ["ShortName", "Organism1", "PERCENTIDENT1", "FILE1",
                "Organism2", "PERCENTIDENT2", "FILE2"],
    "minimal": ["ShortName", "FILE1", "FILE2"],
}
MAX_UPLOAD_BYTES = 20_000_000                          # per uploaded file (api)
# =========================


@dataclass(frozen=True)
class MergeConfig:
    first: Path
    first_scores: Path
    second: Path
    second_scores: Path
    out: Path
    min_ident: Optional[float] = MIN_IDENT
    select: str = "score"
    columns: str = "full"
    sort: bool = False
    sep: str = ","
    drop_unnamed: bool = False
    pairs_fasta: Optional[Path] = None

    @classmethod
    def from_args(cls, args) -> "MergeConfig":
        return cls(
            first=Path(args.first),
            first_scores=Path(args.first_scores),
            second=Path(args.second),
            second_scores=Path(args.second_scores),
            out=Path(args.out),
            min_ident=None if args.no_threshold else args.min_ident,
            select=args.select,
            columns=args.columns,
            sort=args.sort,
            sep=args.sep,
            drop_unnamed=args.drop_unnamed,
            pairs_fasta=Path(args.pairs_fasta) if args.pairs_fasta else None,
        )

    def build_options(self) -> dict:
        """Keyword arguments shared by both per-file builds."""
        return {"min_ident": self.min_ident, "select": self.select,
                "drop_unnamed": self.drop_unnamed}
