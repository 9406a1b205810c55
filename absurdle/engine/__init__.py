from .errors import AbsurdleError, InvalidConfiguration, InvalidGuess
from .feedback import Mark, Pattern, render, parse, is_solved
from .scoring import evaluate
from .selector import partition, bucket_sizes, select
from .dictionary import prune_dictionary
from .validation import validate_guess

__all__ = [
    "AbsurdleError", "InvalidConfiguration", "InvalidGuess",
    "Mark", "Pattern", "render", "parse", "is_solved",
    "evaluate", "partition", "bucket_sizes", "select",
    "prune_dictionary", "validate_guess",
]
