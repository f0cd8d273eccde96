"""
Did-you-mean generator for queries with unbalanced or stray quotes.

Given a raw query the engine returns corrected candidates ordered by priority.
It never raises on malformed input and performs no I/O, so a single engine can
be shared by every request.
"""
from typing import List, Optional, Set

from QueryRepair.Model.SuggestedQuery import SuggestedQuery
from QueryRepair.Search.QueryScanner import parses_cleanly
from QueryRepair.Search.Strategies import QUOTE_WHOLE_THING, quote_whole_query
from QueryRepair.Search.StrategyRegistry import StrategyRegistry

import logging
logger = logging.getLogger(__name__)


def default_registry() -> StrategyRegistry:
    registry = StrategyRegistry()
    registry.register("quote_whole_query", quote_whole_query)
    return registry


class QuerySuggestionEngine:
    """Evaluates the registered strategies in order and collects their candidates."""

    def __init__(self, registry: Optional[StrategyRegistry] = None):
        self.registry = registry or default_registry()

    def propose(self, raw_query: str) -> List[SuggestedQuery]:
        if raw_query == "":
            return [SuggestedQuery(description=QUOTE_WHOLE_THING, query='""')]
        if parses_cleanly(raw_query):
            return []

        proposals: List[SuggestedQuery] = []
        seen: Set[str] = set()
        for strategy in self.registry.strategies():
            candidate = strategy(raw_query)
            if candidate is None or candidate.query == raw_query or candidate.query in seen:
                continue
            seen.add(candidate.query)
            proposals.append(candidate)

        logger.debug("Proposed %d quoted queries for a query of length %d", len(proposals), len(raw_query))
        return proposals


_default_engine = QuerySuggestionEngine()


def propose_quoted_queries(raw_query: str) -> List[SuggestedQuery]:
    return _default_engine.propose(raw_query)
