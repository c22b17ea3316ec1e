#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: palettelab/core/cache.py

from collections import OrderedDict
from typing import Optional

from . import config as c


class SimulationCache:
    """
    Least-recently-used store for simulated colours, keyed "hex:type".

    Reads promote the entry; inserting into a full cache evicts the
    single oldest entry. Not thread-safe: share one instance per thread.
    """

    def __init__(self, max_size: int = c.SIMULATION_CACHE_SIZE):
        if max_size < 1:
            raise ValueError("max_size must be at least 1")
        self.max_size = max_size
        self._data = OrderedDict()

    def get(self, key: str) -> Optional[str]:
        if key not in self._data:
            return None
        self._data.move_to_end(key)
        return self._data[key]

    def set(self, key: str, value: str) -> None:
        if key in self._data:
            self._data.move_to_end(key)
        elif len(self._data) >= self.max_size:
            self._data.popitem(last=False)
        self._data[key] = value

    def clear(self) -> None:
        self._data.clear()

    def __len__(self) -> int:
        return len(self._data)

    def __contains__(self, key: str) -> bool:
        return key in self._data
