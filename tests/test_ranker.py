from __future__ import annotations

import unittest

from digest.draft.ranker import annotate_derived, rank_games, score_game
from digest.ingestion.schema import GameRecord


def _game(
    game_id: str,
    home_score: int | None,
    away_score: int | None,
    *,
    periods: int = 4,
    conference: bool = False,
    completed: bool = True,
) -> GameRecord:
    return GameRecord(
        id=game_id,
        home_team=f"Home {game_id}",
        away_team=f"Away {game_id}",
        home_score=home_score,
        away_score=away_score,
        completed=completed,
        periods_played=periods,
        conference_game=conference,
    )


def _score(game: GameRecord) -> int:
    return score_game(annotate_derived(game))


class ScoreGameTests(unittest.TestCase):
    def test_one_possession_regulation_game(self) -> None:
        game = annotate_derived(_game("1", 28, 24))

        self.assertEqual(4, game.score_differential)
        self.assertEqual(52, game.total_points)
        self.assertEqual("home", game.winner_side)
        self.assertEqual(10, score_game(game))

    def test_one_possession_bonus_boundary(self) -> None:
        self.assertEqual(10, _score(_game("1", 28, 24)))
        self.assertEqual(6, _score(_game("1", 28, 23)))

    def test_tie_stacks_all_close_bonuses(self) -> None:
        self.assertEqual(13, _score(_game("1", 21, 21)))

    def test_tie_resolves_winner_to_home(self) -> None:
        self.assertEqual("home", annotate_derived(_game("1", 21, 21)).winner_side)

    def test_away_winner(self) -> None:
        self.assertEqual("away", annotate_derived(_game("1", 10, 35)).winner_side)

    def test_single_overtime_bonus(self) -> None:
        # 7-point margin (+6), 55 points, one overtime (+4)
        self.assertEqual(10, _score(_game("1", 31, 24, periods=5)))

    def test_multiple_overtime_bonus_replaces_single(self) -> None:
        self.assertEqual(12, _score(_game("1", 31, 24, periods=6)))
        self.assertEqual(12, _score(_game("1", 31, 24, periods=8)))

    def test_shootout_and_conference_bonuses(self) -> None:
        # 7-point margin (+6), 83 points (+3 +2), conference (+1)
        self.assertEqual(12, _score(_game("1", 45, 38, conference=True)))

    def test_shootout_threshold_is_exclusive(self) -> None:
        self.assertEqual(6, _score(_game("1", 39, 31)))
        self.assertEqual(9, _score(_game("1", 39, 32)))

    def test_blowout_scores_zero(self) -> None:
        self.assertEqual(0, _score(_game("1", 56, 3)))

    def test_score_is_deterministic(self) -> None:
        game = annotate_derived(_game("1", 44, 41, periods=5, conference=True))

        self.assertEqual(score_game(game), score_game(game))

    def test_requires_derived_fields(self) -> None:
        with self.assertRaises(ValueError):
            score_game(_game("1", 28, 24))

    def test_annotate_rejects_ineligible_game(self) -> None:
        with self.assertRaises(ValueError):
            annotate_derived(_game("1", None, 24))


class RankGamesTests(unittest.TestCase):
    def test_filters_ineligible_games(self) -> None:
        games = [
            _game("done", 28, 24),
            _game("live", 14, 10, completed=False),
            _game("no-score", None, None),
        ]

        ranked = rank_games(games)

        self.assertEqual(["done"], [game.id for game in ranked])
        self.assertEqual(10, ranked[0].rank_score)

    def test_orders_by_score_descending(self) -> None:
        games = [
            _game("blowout", 49, 7),
            _game("overtime", 34, 31, periods=6),
            _game("close", 20, 14),
        ]

        ranked = rank_games(games)

        self.assertEqual(["overtime", "close", "blowout"], [game.id for game in ranked])
        self.assertEqual([16, 6, 0], [game.rank_score for game in ranked])

    def test_equal_scores_keep_input_order(self) -> None:
        games = [
            _game("a", 42, 7),
            _game("b", 17, 14),
            _game("c", 35, 0),
            _game("d", 24, 21),
            _game("e", 38, 10),
        ]

        ranked = rank_games(games)

        self.assertEqual(["b", "d", "a", "c", "e"], [game.id for game in ranked])

    def test_truncates_to_five(self) -> None:
        games = [_game(str(index), 30 + index, 10) for index in range(8)]

        ranked = rank_games(games)

        self.assertEqual(5, len(ranked))
        self.assertEqual(["0", "1", "2", "3", "4"], [game.id for game in ranked])

    def test_returns_all_when_fewer_than_five_eligible(self) -> None:
        ranked = rank_games([_game("1", 10, 7), _game("2", 3, 0)])

        self.assertEqual(2, len(ranked))

    def test_returns_empty_when_nothing_eligible(self) -> None:
        self.assertEqual([], rank_games([_game("1", None, None, completed=False)]))

    def test_rank_scores_are_non_negative(self) -> None:
        games = [_game(str(index), index * 7, index * 3, periods=4 + index % 3) for index in range(10)]

        for game in rank_games(games, limit=10):
            self.assertGreaterEqual(game.rank_score, 0)


if __name__ == "__main__":
    unittest.main()
