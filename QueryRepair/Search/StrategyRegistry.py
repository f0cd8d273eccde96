"""
Ordered registry of query repair strategies. A strategy is a plain function
taking the raw query and returning a `SuggestedQuery` or None. Strategies are
evaluated in registration order, which is their priority.
"""
from typing import Callable, Dict, List, Optional

from QueryRepair.Model.SuggestedQuery import SuggestedQuery

Strategy = Callable[[str], Optional[SuggestedQuery]]


class StrategyRegistry:
    def __init__(self):
        self._registry: Dict[str, Strategy] = {}

    def register(self, key: str, strategy: Strategy) -> None:
        if key in self._registry:
            raise KeyError(f"Strategy already registered: {key}")
        self._registry[key] = strategy

    def unregister(self, key: str) -> None:
        if key not in self._registry:
            raise KeyError(f"Strategy not registered: {key}")
        del self._registry[key]

    def get(self, key: str) -> Strategy:
        strategy = self._registry.get(key)
        if not strategy:
            raise KeyError(f"Strategy not registered: {key}")
        return strategy

    def strategies(self) -> List[Strategy]:
        return list(self._registry.values())

    def registered_keys(self) -> List[str]:
        return list(self._registry.keys())
