from __future__ import annotations

import logging
import threading
from collections import OrderedDict
from dataclasses import dataclass, field
from typing import Callable, Generic, Hashable, TypeVar

log = logging.getLogger(__name__)

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")

DEFAULT_MAXSIZE = 512


class BoundedCache(Generic[K, V]):
    """
    Insertion-ordered memo table with a hard entry cap.

    Eviction is FIFO: once `maxsize` entries are held, inserting a new key
    drops the oldest inserted one. Hits do not refresh an entry's position.
    Evict-then-insert happens under one lock.
    """

    def __init__(self, maxsize: int = DEFAULT_MAXSIZE) -> None:
        if maxsize < 1:
            raise ValueError("maxsize must be ≥ 1")
        self.maxsize = int(maxsize)
        self._data: OrderedDict[K, V] = OrderedDict()
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._data)

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def get(self, key: K, default: V | None = None) -> V | None:
        return self._data.get(key, default)

    def put(self, key: K, value: V) -> None:
        with self._lock:
            if key in self._data:
                self._data[key] = value
                return
            while len(self._data) >= self.maxsize:
                old, _ = self._data.popitem(last=False)
                log.debug("cache full (%d), evicted %r", self.maxsize, old)
            self._data[key] = value

    def get_or_compute(self, key: K, compute: Callable[[], V]) -> V:
        try:
            return self._data[key]
        except KeyError:
            pass
        value = compute()
        self.put(key, value)
        return value

    def clear(self) -> None:
        with self._lock:
            self._data.clear()


@dataclass
class ColorCaches:
    """The three memo tables used by the conversion layer."""

    maxsize: int = DEFAULT_MAXSIZE
    hex_rgb: BoundedCache = field(init=False)
    rgb_hsl: BoundedCache = field(init=False)
    luminance: BoundedCache = field(init=False)

    def __post_init__(self) -> None:
        self.hex_rgb = BoundedCache(self.maxsize)
        self.rgb_hsl = BoundedCache(self.maxsize)
        self.luminance = BoundedCache(self.maxsize)

    def clear(self) -> None:
        for c in (self.hex_rgb, self.rgb_hsl, self.luminance):
            c.clear()


__all__ = ["BoundedCache", "ColorCaches", "DEFAULT_MAXSIZE"]
