"""str_increment package exports."""
from .client import APIError, APIResponse, SequenceClient
from .runner import BatchResult, SequenceResult, iter_sequence, run_bulk_sequence, run_sequence
from .utils import (
    CharClass,
    classify,
    decrement,
    increment,
    is_incrementable,
    strict_decrement,
    strict_increment,
)

__all__ = [
    "increment",
    "decrement",
    "strict_increment",
    "strict_decrement",
    "is_incrementable",
    "classify",
    "CharClass",
    "iter_sequence",
    "run_sequence",
    "SequenceResult",
    "run_bulk_sequence",
    "BatchResult",
    "SequenceClient",
    "APIResponse",
    "APIError",
]
