from typing import Any, Dict, Optional

from QueryRepair.Search.QueryScanner import parses_cleanly
from QueryRepair.Search.SuggestionEngine import QuerySuggestionEngine

import logging
logger = logging.getLogger(__name__)


class SearchBusiness:

    """Answers "did you mean" requests for raw search queries."""
    def __init__(self, engine: Optional[QuerySuggestionEngine] = None):
        self.engine = engine or QuerySuggestionEngine()

    def DidYouMean(self, raw_query: str) -> Dict[str, Any]:
        valid = raw_query != "" and parses_cleanly(raw_query)
        suggestions = self.engine.propose(raw_query)
        logger.info("did-you-mean: length=%d valid=%s suggestions=%d", len(raw_query), valid, len(suggestions))
        return {
            "query": raw_query,
            "valid": valid,
            "suggestions": suggestions,
        }
