"""
Simple parser for extracting basic game information from Star Realms logs
Finds the players from turn start lines and the winner from the game end line
"""
import json
import os
import logging
from dataclasses import dataclass
from typing import List, Optional, Dict, Any, Tuple

from .patterns import TURN_START_PATTERN, extract_winner

logger = logging.getLogger(__name__)


class GameLogParseError(ValueError):
    """Base class for logs that don't yield a consistent game summary"""


class NoPlayersFoundError(GameLogParseError):
    """No turn start line matched anywhere in the log"""

    def __init__(self):
        super().__init__("Failed to extract players from game log")


class NoWinnerFoundError(GameLogParseError):
    """No game end line matched anywhere in the log"""

    def __init__(self):
        super().__init__("Failed to extract winner from game log")


class WinnerNotAPlayerError(GameLogParseError):
    """The game end line names someone who never took a turn"""

    def __init__(self, winner: str, players: List[str]):
        self.winner = winner
        self.players = list(players)
        super().__init__(f'Winner "{winner}" is not in the list of players: {", ".join(players)}')


@dataclass(frozen=True)
class BasicGame:
    """Basic game information extracted from a game log: player names and winner"""
    players: Tuple[str, ...]  # distinct names in order of first turn
    winner: str

    def __post_init__(self):
        object.__setattr__(self, 'players', tuple(self.players))

    def to_dict(self) -> Dict[str, Any]:
        return {'players': list(self.players), 'winner': self.winner}


def _split_lines(log: str) -> List[str]:
    # Logs saved on Windows use CRLF, older exports a bare CR
    return log.replace('\r\n', '\n').replace('\r', '\n').split('\n')


def parse_game_basics(log: str) -> BasicGame:
    """
    Parse a Star Realms game log and extract basic information

    Args:
        log: The complete game log as a string

    Returns:
        BasicGame with the player names and the winner

    Raises:
        NoPlayersFoundError: no turn start lines in the log
        NoWinnerFoundError: no game end line in the log
        WinnerNotAPlayerError: the winner never started a turn
    """
    lines = _split_lines(log)

    players = _collect_players(lines)
    winner = _find_winner(lines)

    if not players:
        raise NoPlayersFoundError()

    if not winner:
        raise NoWinnerFoundError()

    if winner not in players:
        raise WinnerNotAPlayerError(winner, players)

    logger.info(f"Parsed game log: {len(players)} players, winner {winner}")
    return BasicGame(players=players, winner=winner)


def extract_players(log: str) -> List[str]:
    """Extract unique player names from turn start lines, in order of appearance"""
    return list(_collect_players(_split_lines(log)))


def find_winner(log: str) -> Optional[str]:
    """Extract the winner name from the first game end line"""
    return _find_winner(_split_lines(log))


def _collect_players(lines: List[str]) -> Tuple[str, ...]:
    # dict keeps insertion order and drops repeats
    seen = {}
    last_turn = None

    for line in lines:
        match = TURN_START_PATTERN.search(line)
        if match:
            seen.setdefault(match.group(1), None)
            last_turn = int(match.group(2))

    logger.debug(f"Found {len(seen)} players, last turn number {last_turn}")
    return tuple(seen)


def _find_winner(lines: List[str]) -> Optional[str]:
    for line in lines:
        winner = extract_winner(line)
        if winner is not None:
            return winner

    return None


def parse_game_file(log_path: str) -> BasicGame:
    """Read a game log from disk and parse it"""
    logger.info(f"Parsing game log {log_path}")

    with open(log_path, 'r', encoding='utf-8') as f:
        log = f.read()

    return parse_game_basics(log)


def export_to_json(game: BasicGame, output_path: str):
    """Export a game summary to JSON"""
    output_dir = os.path.dirname(output_path)
    if output_dir:
        os.makedirs(output_dir, exist_ok=True)

    with open(output_path, 'w', encoding='utf-8') as f:
        json.dump(game.to_dict(), f, indent=2, ensure_ascii=False)

    logger.info(f"Exported game summary to {output_path}")
