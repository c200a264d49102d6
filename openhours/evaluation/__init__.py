"""Status evaluation, formatting and ordering."""

from openhours.evaluation.comparator import compare_by_open_status, sort_statuses
from openhours.evaluation.evaluator import evaluate, evaluate_at, evaluate_parse_result
from openhours.evaluation.formatter import format_time

__all__ = [
    "compare_by_open_status",
    "evaluate",
    "evaluate_at",
    "evaluate_parse_result",
    "format_time",
    "sort_statuses",
]
