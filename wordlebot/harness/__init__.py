from .core import run_case, run_batch, summarize
from .io import RunReport, write_csv

__all__ = ["run_case", "run_batch", "summarize", "RunReport", "write_csv"]
