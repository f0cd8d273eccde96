import pytest

from QueryRepair.Search.StrategyRegistry import StrategyRegistry
from QueryRepair.Search.Strategies import quote_whole_query
from QueryRepair.Search.SuggestionEngine import default_registry


def test_register_and_get():
    registry = StrategyRegistry()
    registry.register("whole", quote_whole_query)
    assert registry.get("whole") is quote_whole_query
    assert registry.registered_keys() == ["whole"]


def test_duplicate_and_missing_keys():
    registry = StrategyRegistry()
    registry.register("whole", quote_whole_query)
    with pytest.raises(KeyError):
        registry.register("whole", quote_whole_query)
    with pytest.raises(KeyError):
        registry.get("missing")
    registry.unregister("whole")
    assert registry.strategies() == []


def test_default_registry_only_quotes_whole_query():
    assert default_registry().registered_keys() == ["quote_whole_query"]
