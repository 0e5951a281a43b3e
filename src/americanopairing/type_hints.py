"""Type hints used in Americano Pairing."""

from typing import List, Tuple

# List of players
Players = List["Player"]
# Two players sharing a side of the net
Team = Tuple["Player", "Player"]
# Four players considered together for one court
Quad = Tuple["Player", "Player", "Player", "Player"]
# (team1, team2) split of a quad
TeamSplit = Tuple[Team, Team]

#  LocalWords:  TeamSplit
