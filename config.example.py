# Star Realms Log Parser Configuration Template
# Copy this file to config.py and update with your values

# Data storage paths
RAW_LOGS_DIR = 'data/logs'  # Game logs exported from the Star Realms client
PARSED_DATA_DIR = 'data/parsed'  # JSON summaries written by "main.py parse --export"

# Which files in RAW_LOGS_DIR count as game logs
LOG_FILE_PATTERN = '*.txt'

# Logging
LOG_FILE = 'parser.log'
LOG_LEVEL = 'INFO'  # DEBUG, INFO, WARNING, ERROR

# Analysis settings
# Players with fewer parsed games than this are left out of the win rate table
ANALYSIS_MIN_GAMES = 1
