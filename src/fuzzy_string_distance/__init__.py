from fuzzy_string_distance.levenshtein import levenshtein
from fuzzy_string_distance.levenshtein import levenshtein_ignore_ascii_case
from fuzzy_string_distance.local import local_levenshtein
from fuzzy_string_distance.local import local_levenshtein_ignore_ascii_case

__all__ = [
    "levenshtein",
    "levenshtein_ignore_ascii_case",
    "local_levenshtein",
    "local_levenshtein_ignore_ascii_case",
]
