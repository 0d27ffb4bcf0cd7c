from .core import RankingResult, ScoredWord, rank_guesses, run_ranking, select_guess_pool
from .io import format_ranking, write_scores_json

__all__ = ["ScoredWord", "RankingResult", "rank_guesses", "run_ranking", "select_guess_pool",
           "format_ranking", "write_scores_json"]
