from .core import Session, SessionState, run_case, run_batch
from .io import write_csv, write_manifest
from .stats import summarize, pretty_stats

__all__ = [
    "Session", "SessionState", "run_case", "run_batch",
    "write_csv", "write_manifest",
    "summarize", "pretty_stats",
]
