#!/usr/bin/env python3
"""
Tests for the win rate analysis script
"""
import csv
import json
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent / 'analysis'))

from analyze_win_rates import (  # noqa: E402
    analyze_win_rates,
    plot_win_rates,
    process_summary_file,
    save_player_summary_to_csv,
)


def write_summary(directory, name, players, winner):
    path = directory / f'{name}.json'
    path.write_text(json.dumps({'players': players, 'winner': winner}), encoding='utf-8')
    return path


def test_win_rates(tmp_path):
    write_summary(tmp_path, 'game1', ['Alice', 'Bob'], 'Alice')
    write_summary(tmp_path, 'game2', ['Alice', 'Bob'], 'Bob')
    write_summary(tmp_path, 'game3', ['Alice', 'Carol'], 'Alice')

    player_stats = analyze_win_rates(tmp_path)

    assert player_stats['Alice'] == {'games_played': 3, 'games_won': 2, 'win_rate': 2 / 3}
    assert player_stats['Bob'] == {'games_played': 2, 'games_won': 1, 'win_rate': 0.5}
    assert player_stats['Carol']['games_won'] == 0


def test_min_games_filter(tmp_path):
    write_summary(tmp_path, 'game1', ['Alice', 'Bob'], 'Alice')
    write_summary(tmp_path, 'game2', ['Alice', 'Carol'], 'Carol')

    player_stats = analyze_win_rates(tmp_path, min_games=2)

    assert list(player_stats) == ['Alice']


def test_inconsistent_summaries_skipped(tmp_path):
    write_summary(tmp_path, 'bad_winner', ['Alice', 'Bob'], 'Charlie')
    (tmp_path / 'broken.json').write_text('{not json', encoding='utf-8')

    assert process_summary_file(tmp_path / 'bad_winner.json') is None
    assert process_summary_file(tmp_path / 'broken.json') is None
    assert analyze_win_rates(tmp_path) == {}


def test_missing_data_dir(tmp_path):
    assert analyze_win_rates(tmp_path / 'nowhere') == {}


def test_save_csv_and_chart(tmp_path):
    write_summary(tmp_path, 'game1', ['Alice', 'Bob'], 'Bob')
    player_stats = analyze_win_rates(tmp_path)

    csv_file = tmp_path / 'summary.csv'
    chart_file = tmp_path / 'chart.png'
    save_player_summary_to_csv(player_stats, csv_file)
    plot_win_rates(player_stats, chart_file)

    with open(csv_file, 'r', encoding='utf-8', newline='') as f:
        rows = list(csv.DictReader(f))

    assert rows[0]['player_name'] == 'Bob'
    assert rows[0]['win_rate'] == '1.0'
    assert chart_file.exists()
