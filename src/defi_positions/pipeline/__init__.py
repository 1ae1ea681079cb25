from .context import ScanContext
from .run import run_scan

__all__ = ["ScanContext", "run_scan"]
