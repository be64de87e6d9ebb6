"""
Star Realms Game Log Parser Package
"""
from .basic_parser import (
    BasicGame,
    GameLogParseError,
    NoPlayersFoundError,
    NoWinnerFoundError,
    WinnerNotAPlayerError,
    parse_game_basics,
    parse_game_file,
    export_to_json,
)
from .patterns import strip_color_tags, extract_player_from_turn_start, extract_winner

__all__ = [
    'BasicGame', 'GameLogParseError', 'NoPlayersFoundError', 'NoWinnerFoundError',
    'WinnerNotAPlayerError', 'parse_game_basics', 'parse_game_file', 'export_to_json',
    'strip_color_tags', 'extract_player_from_turn_start', 'extract_winner',
]
