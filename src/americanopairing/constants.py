# Americano Pairing
# Copyright (C) 2025  Americano Pairing developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

# --- Roster / match shape ---
PLAYERS_PER_MATCH = 4
MIN_PLAYERS = PLAYERS_PER_MATCH

# --- Tournament formats ---
FORMAT_AMERICANO = "americano"
FORMAT_ROUND_ROBIN = "roundrobin"
FORMAT_SWISS = "swiss"
FORMAT_ELIMINATION = "elimination"
DEFAULT_FORMAT = FORMAT_AMERICANO

# --- Configuration defaults ---
DEFAULT_ROUND_DURATION = 15  # minutes
DEFAULT_START_TIME = "09:00"
DEFAULT_END_TIME = "18:00"
# Upper bound on rounds, keeps a run bounded when rounds are derived from time
MAX_ROUNDS = 25
MINUTES_PER_DAY = 24 * 60
TIME_FORMAT = "%H:%M"

# --- Ledger sentinels ---
NEVER_PAIRED_ROUND = -100
NEVER_RESTED_ROUND = -10

# --- Candidate search ---
TOP_PRIORITY_SLICE = 8
ANCHOR_SLICE = 4
# (max available players, candidates evaluated per court)
SEARCH_DEPTH_STEPS = (
    (8, 70),
    (12, 150),
    (20, 250),
)
MAX_SEARCH_DEPTH = 400

# --- Match scoring weights ---
# Partner novelty dominates opponent novelty, which dominates everything else.
NEW_PARTNER_BONUS = 200.0
PARTNER_DISTANCE_CAP = 10
PARTNER_DISTANCE_WEIGHT = 15.0
PARTNER_REPEAT_PENALTY = 80.0
PARTNER_RECENT_WINDOW = 2
PARTNER_RECENT_PENALTY = 150.0

NEW_OPPONENT_BONUS = 150.0
OPPONENT_DISTANCE_CAP = 8
OPPONENT_DISTANCE_WEIGHT = 12.0
OPPONENT_REPEAT_PENALTY = 40.0
OPPONENT_RECENT_WINDOW = 1
OPPONENT_RECENT_PENALTY = 60.0

GAMES_VARIANCE_WEIGHT = 25.0
REST_BONUS_THRESHOLD = 5
REST_BONUS_WEIGHT = 3.0
SKILL_DIFFERENCE_WEIGHT = 15.0
SAME_COURT_PENALTY = 10.0
JITTER_WEIGHT = 2.0
# seed = variant_index * VARIANT_SEED_STRIDE + player_count
VARIANT_SEED_STRIDE = 1000

# --- Skill levels ---
# Letter scale used by padel clubs, lowest to highest
SKILL_LETTERS = ("C", "B-", "B", "B+", "A-", "A")
SKILL_LETTER_ALIASES = {"C+": "C", "A+": "A"}
SKILL_RANKS = {letter: rank for rank, letter in enumerate(SKILL_LETTERS, start=1)}
# Numeric scale (pickleball style) mapped onto the letter ordinals
MIN_NUMERIC_SKILL = 1.0
MAX_NUMERIC_SKILL = 6.0
NUMERIC_SKILL_BANDS = (
    (3.0, 1),
    (3.5, 2),
    (4.0, 3),
    (4.5, 4),
    (5.0, 5),
)
TOP_SKILL_RANK = len(SKILL_LETTERS)
# Rank "B"; used for unrated players in a match with rated ones
DEFAULT_SKILL_RANK = SKILL_RANKS["B"]

# --- Quality analysis ---
MIN_COMFORTABLE_REPEAT_GAP = 3

# --- Fairness forecast ---
FORECAST_WEIGHTS = {
    "partner_variety": 0.40,
    "game_balance": 0.25,
    "opponent_variety": 0.20,
    "court_ratio": 0.10,
    "games_per_player": 0.05,
}
FORECAST_MIN_SCORE = 10
FORECAST_MAX_SCORE = 85
FORECAST_STATUS_THRESHOLDS = (
    (70, "excellent", "Very good fairness, recommended"),
    (60, "good", "Good fairness, works well for Americano"),
    (50, "acceptable", "Acceptable fairness with minor compromises"),
    (40, "poor", "Moderate fairness, players may notice repeats"),
)
FORECAST_FALLBACK_STATUS = ("terrible", "Poor fairness, not recommended for Americano")
