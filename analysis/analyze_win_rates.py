#!/usr/bin/env python3
"""
Analyze win rates for Star Realms players.

Win rate is calculated as: games won / games played

This script reads every game summary exported by "main.py parse --export"
and aggregates, per player name, how many games they played and won.
"""

import csv
import json
import sys
from collections import defaultdict
from pathlib import Path

import matplotlib.pyplot as plt


def process_summary_file(file_path):
    """
    Load a single exported game summary.
    Returns dict with players and winner or None if the file is unusable.
    """
    try:
        with open(file_path, 'r', encoding='utf-8') as f:
            summary = json.load(f)

        players = summary['players']
        winner = summary['winner']

        if not players or winner not in players:
            print(f"Warning: Inconsistent summary in {file_path}, skipping")
            return None

        return {
            'game': Path(file_path).stem,
            'players': players,
            'winner': winner
        }

    except (json.JSONDecodeError, KeyError, TypeError, FileNotFoundError) as e:
        print(f"Warning: Could not process {file_path}: {e}")
        return None


def find_all_summary_files(data_dir):
    """Find all JSON game summaries in the data directory."""
    data_path = Path(data_dir)

    if not data_path.exists():
        print(f"Error: Data directory {data_dir} does not exist")
        return []

    return sorted(data_path.glob("*.json"))


def analyze_win_rates(data_dir, min_games=1):
    """
    Main analysis function that processes all summaries and calculates win rate statistics.
    """
    print("Starting win rate analysis...")

    summary_files = find_all_summary_files(data_dir)
    print(f"Found {len(summary_files)} game summaries")

    games_played = defaultdict(int)
    games_won = defaultdict(int)
    processed_games = 0

    for summary_file in summary_files:
        game = process_summary_file(summary_file)
        if not game:
            continue

        processed_games += 1
        for player_name in game['players']:
            games_played[player_name] += 1
        games_won[game['winner']] += 1

    player_stats = {}
    for player_name, played in games_played.items():
        if played < min_games:
            continue

        won = games_won.get(player_name, 0)
        player_stats[player_name] = {
            'games_played': played,
            'games_won': won,
            'win_rate': won / played
        }

    print(f"Total games processed: {processed_games}")
    print(f"Players with data: {len(player_stats)}")

    return player_stats


def display_results(player_stats):
    """Display analysis results."""
    if not player_stats:
        print("No results to display.")
        return

    print("\n" + "=" * 60)
    print("WIN RATE ANALYSIS RESULTS")
    print("=" * 60)

    sorted_players = sorted(player_stats.items(),
                            key=lambda x: (x[1]['win_rate'], x[1]['games_played']),
                            reverse=True)

    print(f"\n{'Rank':<4} {'Player Name':<24} {'Played':<7} {'Won':<5} {'Win Rate':<8}")
    print("-" * 60)

    for rank, (player_name, stats) in enumerate(sorted_players, 1):
        print(f"{rank:<4} {player_name:<24} {stats['games_played']:<7} "
              f"{stats['games_won']:<5} {stats['win_rate']:<8.1%}")


def save_player_summary_to_csv(player_stats, output_file):
    """Save player win rate statistics to a CSV file."""
    if not player_stats:
        print("No player summary to save.")
        return

    fieldnames = ['player_name', 'games_played', 'games_won', 'win_rate']

    with open(output_file, 'w', newline='', encoding='utf-8') as csvfile:
        writer = csv.DictWriter(csvfile, fieldnames=fieldnames, quoting=csv.QUOTE_ALL)
        writer.writeheader()

        sorted_players = sorted(player_stats.items(),
                                key=lambda x: x[1]['win_rate'],
                                reverse=True)

        for player_name, stats in sorted_players:
            writer.writerow({
                'player_name': player_name,
                'games_played': stats['games_played'],
                'games_won': stats['games_won'],
                'win_rate': round(stats['win_rate'], 4)
            })

    print(f"Player summary saved to: {output_file}")


def plot_win_rates(player_stats, output_file):
    """Bar chart of win rate per player, busiest players first."""
    if not player_stats:
        print("No data to plot.")
        return

    sorted_players = sorted(player_stats.items(),
                            key=lambda x: x[1]['games_played'],
                            reverse=True)
    names = [name for name, _ in sorted_players]
    win_rates = [stats['win_rate'] * 100 for _, stats in sorted_players]
    total_games = sum(stats['games_played'] for _, stats in sorted_players)

    plt.figure(figsize=(12, 8))
    plt.bar(names, win_rates, color='steelblue', alpha=0.8)

    plt.xlabel('Player', fontsize=12)
    plt.ylabel('Win rate (%)', fontsize=12)
    plt.title(f"Star Realms: Win rate by player (player-games={total_games})", fontsize=14, fontweight='bold')
    plt.ylim(0, 100)
    plt.xticks(rotation=45, ha='right')
    plt.grid(True, axis='y', alpha=0.3)

    plt.tight_layout()
    plt.savefig(output_file, dpi=300, bbox_inches='tight')
    plt.close()

    print(f"Chart saved to: {output_file}")


def main():
    """Main function to run the win rate analysis."""
    script_dir = Path(__file__).parent
    project_root = script_dir.parent
    data_dir = project_root / "data" / "parsed"
    summary_output_file = script_dir / "win_rate_summary.csv"
    chart_output_file = script_dir / "win_rates.png"

    min_games = 1
    try:
        sys.path.insert(0, str(project_root))
        import config
        data_dir = project_root / config.PARSED_DATA_DIR
        min_games = getattr(config, 'ANALYSIS_MIN_GAMES', 1)
    except ImportError:
        print("config.py not found, using default paths")

    print("Star Realms - Win Rate Analysis")
    print("=" * 50)

    player_stats = analyze_win_rates(data_dir, min_games)

    if player_stats:
        display_results(player_stats)
        save_player_summary_to_csv(player_stats, summary_output_file)
        plot_win_rates(player_stats, chart_output_file)

        print(f"\nAnalysis complete! Check the CSV file and chart for details.")
    else:
        print("No data found to analyze.")


if __name__ == "__main__":
    main()
