from .session import GameSession
from .core import run_case, run_batch, summarize
from .io import write_csv, write_manifest

__all__ = ["GameSession", "run_case", "run_batch", "summarize", "write_csv", "write_manifest"]
