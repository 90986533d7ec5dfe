"""Dialogue management: graph, matching, and the turn engine."""

from sortium.dm.engine import DialogEngine, TurnResult
from sortium.dm.graph import DialogGraph
from sortium.dm.matching import match_option

__all__ = ["DialogEngine", "TurnResult", "DialogGraph", "match_option"]
