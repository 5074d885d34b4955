"""Template-based recap text for ranked games.

Each game is classified once into a ``GameCharacter``; the lead sentence and
the headline stat are looked up from tables keyed by that character. The
"why it mattered" line is the only randomized field and draws from a fixed
candidate set through an injectable ``random.Random``.
"""

from __future__ import annotations

import random
from enum import Enum
from typing import Callable

from digest.draft.ranker import CLOSE_MARGIN, REGULATION_PERIODS, SHOOTOUT_POINTS
from digest.ingestion.schema import GameRecord


class GameCharacter(str, Enum):
    OVERTIME = "overtime"
    SHOOTOUT_CLOSE = "shootout_close"
    CLOSE = "close"
    DOMINANT = "dominant"
    SHOOTOUT_DOMINANT = "shootout_dominant"


GENERIC_RATIONALE = "Resilience under pressure separated the winner when the game turned"

_SHOOTOUT_RATIONALES = (
    "Explosive plays outpaced every defensive adjustment",
    "Offensive efficiency on early downs kept the scoreboard moving",
    GENERIC_RATIONALE,
)
_CLOSE_RATIONALES = (
    "Defensive stops on critical downs decided the outcome",
    "Special teams execution swung field position",
    GENERIC_RATIONALE,
)
_DEFAULT_RATIONALES = (
    "Control of the line of scrimmage set the tone from the first series",
    "Depth wore the opponent down over four quarters",
    GENERIC_RATIONALE,
)


def _require_derived(record: GameRecord) -> None:
    if record.score_differential is None or record.total_points is None or record.winner_side is None:
        raise ValueError(f"Game {record.id!r} must be ranked before synthesis")


def is_overtime(record: GameRecord) -> bool:
    return record.periods_played > REGULATION_PERIODS


def is_close(record: GameRecord) -> bool:
    return record.score_differential <= CLOSE_MARGIN


def is_shootout(record: GameRecord) -> bool:
    return record.total_points > SHOOTOUT_POINTS


def classify_game(record: GameRecord) -> GameCharacter:
    _require_derived(record)
    shootout = is_shootout(record)
    if is_overtime(record):
        return GameCharacter.OVERTIME
    if is_close(record):
        return GameCharacter.SHOOTOUT_CLOSE if shootout else GameCharacter.CLOSE
    return GameCharacter.SHOOTOUT_DOMINANT if shootout else GameCharacter.DOMINANT


def _final_score(record: GameRecord) -> str:
    return f"{record.winner_score}–{record.loser_score}"


def _overtime_label(record: GameRecord) -> str:
    extra = record.periods_played - REGULATION_PERIODS
    if extra == 1:
        return "overtime"
    if extra == 2:
        return "double overtime"
    if extra == 3:
        return "triple overtime"
    return f"{extra} overtimes"


def _points(value: int) -> str:
    return f"{value} point" if value == 1 else f"{value} points"


def _overtime_lead(record: GameRecord) -> str:
    if is_shootout(record):
        return (
            f"{record.winner} outlasted {record.loser} {_final_score(record)} "
            f"in a {_overtime_label(record)} shootout."
        )
    return f"{record.winner} edged {record.loser} {_final_score(record)} in {_overtime_label(record)}."


def _shootout_close_lead(record: GameRecord) -> str:
    return (
        f"{record.winner} held off {record.loser} by {_points(record.score_differential)} "
        f"in a {record.total_points}-point thriller."
    )


def _close_lead(record: GameRecord) -> str:
    return f"{record.winner} escaped with a narrow {_final_score(record)} victory over {record.loser}."


def _shootout_dominant_lead(record: GameRecord) -> str:
    return f"{record.winner} pulled away from {record.loser} in a {_final_score(record)} track meet."


def _dominant_lead(record: GameRecord) -> str:
    return f"{record.winner} controlled {record.loser} from start to finish in a {_final_score(record)} win."


_LEAD_SENTENCES: dict[GameCharacter, Callable[[GameRecord], str]] = {
    GameCharacter.OVERTIME: _overtime_lead,
    GameCharacter.SHOOTOUT_CLOSE: _shootout_close_lead,
    GameCharacter.CLOSE: _close_lead,
    GameCharacter.SHOOTOUT_DOMINANT: _shootout_dominant_lead,
    GameCharacter.DOMINANT: _dominant_lead,
}

_ONE_STATS: dict[GameCharacter, Callable[[GameRecord], str]] = {
    GameCharacter.OVERTIME: lambda game: f"{game.periods_played} periods played",
    GameCharacter.SHOOTOUT_CLOSE: lambda game: f"{game.total_points} combined points",
    GameCharacter.SHOOTOUT_DOMINANT: lambda game: f"{game.total_points} combined points",
    GameCharacter.CLOSE: lambda game: f"{game.score_differential}-point margin",
    GameCharacter.DOMINANT: lambda game: f"{game.winner} won by {game.score_differential}",
}


def _follow_up_sentence(record: GameRecord) -> str:
    if is_shootout(record):
        # Phrasing differs by which side won; kept for output compatibility.
        if record.winner_side == "home":
            return f"{record.winner} came up with more stops as the offenses traded blows."
        return f"{record.loser} fell short on drives that could have flipped the result."
    if is_close(record):
        # Also used for close overtime games, whose lead sentence already says overtime.
        return "The outcome was not settled until late in the fourth quarter."
    return f"{record.winner} established momentum early and never gave it back."


def why_it_mattered_candidates(record: GameRecord) -> tuple[str, ...]:
    _require_derived(record)
    if is_shootout(record):
        return _SHOOTOUT_RATIONALES
    if is_close(record):
        return _CLOSE_RATIONALES
    return _DEFAULT_RATIONALES


def build_recap(record: GameRecord) -> str:
    character = classify_game(record)
    return f"{_LEAD_SENTENCES[character](record)} {_follow_up_sentence(record)}"


def synthesize_recap(record: GameRecord, rng: random.Random | None = None) -> GameRecord:
    """Fill recap, one_stat and why_it_mattered on a ranked record."""
    chooser = rng if rng is not None else random
    character = classify_game(record)
    record.recap = build_recap(record)
    record.one_stat = _ONE_STATS[character](record)
    record.why_it_mattered = chooser.choice(why_it_mattered_candidates(record))
    return record
