from .parser import parse_diff
from .prompts import build_review_prompt
from .report import format_report
from .engine import ReviewEngine

__all__ = ["parse_diff", "build_review_prompt", "format_report", "ReviewEngine"]
