"""
Pattern matching utilities for Star Realms game log parsing
"""
import re
from typing import Optional

# Pattern: "It is now {PLAYER_NAME}'s turn {TURN_NUMBER}"
# Groups: [1] = player name, [2] = turn number
TURN_START_PATTERN = re.compile(r"It is now (.+?)'s turn (\d+)")

# Pattern: "=== {PLAYER_NAME} has won the game. ==="
# Groups: [1] = winner name
GAME_END_PATTERN = re.compile(r"=== (.+?) has won the game\. ===")

# Card names are wrapped like "<color=#FFFF00>Imperial Frigate</color>"
COLOR_TAG_PATTERN = re.compile(r'<color=#[0-9A-Fa-f]{6}>|</color>')


def strip_color_tags(text: str) -> str:
    """
    Strip color tags from game log text

    Example: "<color=#FFFF00>Imperial Frigate</color>" -> "Imperial Frigate"
    """
    return COLOR_TAG_PATTERN.sub('', text)


def extract_player_from_turn_start(line: str) -> Optional[str]:
    """Extract player name from a turn start line, None if the line doesn't match"""
    match = TURN_START_PATTERN.search(line)
    return match.group(1) if match else None


def extract_winner(line: str) -> Optional[str]:
    """Extract winner name from a game end line, None if the line doesn't match"""
    match = GAME_END_PATTERN.search(line)
    return match.group(1) if match else None
