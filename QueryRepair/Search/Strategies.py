"""Built-in repair strategies."""
from typing import Optional

from QueryRepair.Model.SuggestedQuery import SuggestedQuery
from QueryRepair.Search.QueryScanner import ESCAPE, QUOTE

QUOTE_WHOLE_THING = "quote the whole thing"


def escape_quotes(raw: str) -> str:
    # Escape the escape character first so existing backslashes stay literal.
    return raw.replace(ESCAPE, ESCAPE + ESCAPE).replace(QUOTE, ESCAPE + QUOTE)


def quote_whole_query(raw: str) -> Optional[SuggestedQuery]:
    """Treat the entire input as one literal phrase."""
    return SuggestedQuery(description=QUOTE_WHOLE_THING, query=f"{QUOTE}{escape_quotes(raw)}{QUOTE}")
