from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence


class QuoteAdapter(ABC):
    @abstractmethod
    def fetch_quotes(self, symbols: Sequence[str]) -> bytes:
        raise NotImplementedError
