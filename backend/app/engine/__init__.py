from .classifier import KeywordClassifier
from .progress_calculator import ProgressScore, compute_progress
from .progress_service import ProgressService
from .timeline_builder import build_timeline

__all__ = [
    "KeywordClassifier",
    "ProgressScore",
    "ProgressService",
    "build_timeline",
    "compute_progress",
]
