"""Schedule statistics, quality analysis and fairness forecasts."""

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

from americanopairing.analysis.forecast import (
    FairnessForecast,
    PlayerCountSuggestion,
    estimate_fairness,
    suggest_player_count,
)
from americanopairing.analysis.quality import (
    ScheduleQualityReport,
    analyze_schedule_quality,
)
from americanopairing.analysis.statistics import (
    FinalStatistics,
    PlayerStatistics,
    StatisticsSummarizer,
    StatisticsSummary,
    calculate_fairness,
    create_statistics_summarizer,
)

__all__ = [
    "PlayerStatistics",
    "StatisticsSummary",
    "FinalStatistics",
    "StatisticsSummarizer",
    "calculate_fairness",
    "create_statistics_summarizer",
    "ScheduleQualityReport",
    "analyze_schedule_quality",
    "FairnessForecast",
    "PlayerCountSuggestion",
    "estimate_fairness",
    "suggest_player_count",
]
