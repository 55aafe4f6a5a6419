"""Dictionary sources for BeeSolver."""

from beesolver.data.dictionary import (
    DEFAULT_DICTIONARY,
    dictionary_exists,
    iter_dictionary_words,
    load_builtin_words,
)

__all__ = [
    "DEFAULT_DICTIONARY",
    "dictionary_exists",
    "iter_dictionary_words",
    "load_builtin_words",
]
