from .builder import build_map, build_map_from_files, is_low_quality
from .config import MergeConfig
from .merge import MergedRow, join_maps, rows_to_frame, write_pairs_fasta, write_table
from .pipeline import MergeResult, build_both, build_both_texts, build_map_from_text, merge, run
from .records import (QUALIFIER, SequenceEntry, canonical_name, extract_accession,
                      extract_annotation, split_records)
from .scores import ScoreTableError, parse_hit_scores, read_hit_scores

__version__ = "0.1.0"
