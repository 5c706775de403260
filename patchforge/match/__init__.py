from .rank import dedupe_matches, rank_matches
from .scoring import score_context_window, score_fixed_window
from .search import search_windows
from .similarity import levenshtein_distance, lines_match, lines_similarity, similarity_ratio

__all__ = [
    "levenshtein_distance",
    "similarity_ratio",
    "lines_match",
    "lines_similarity",
    "score_fixed_window",
    "score_context_window",
    "search_windows",
    "dedupe_matches",
    "rank_matches",
]
