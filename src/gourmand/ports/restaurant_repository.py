from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Sequence

from gourmand.domain.restaurant import Cuisine, Restaurant


class RestaurantRepository(ABC):
    """
    Port for restaurant catalog access.

    Implementations load the whole catalog up front and expose read-only
    snapshots. Filtering and ranking are not their concern (see domain.search).

    Contract:
        - find_all() returns restaurants in source order
        - find_all_cuisines() returns cuisines in source order
        - Returned sequences cannot be mutated by callers
        - Restaurants share Cuisine instances with find_all_cuisines()
    """

    @abstractmethod
    def find_all(self) -> Sequence[Restaurant]: ...

    @abstractmethod
    def find_all_cuisines(self) -> Sequence[Cuisine]: ...
