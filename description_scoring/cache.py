"""원격 채점 결과 캐시 (용량 제한 + TTL 만료)"""
from __future__ import annotations

import hashlib
import logging
import threading
import time
from collections import OrderedDict
from dataclasses import dataclass
from typing import Callable, Dict, Optional

from config import DEFAULT_CACHE_CONFIG
from color_utils import ColorTarget
from description_scoring.models import ScoreResponse, ScoreResult

logger = logging.getLogger("whats_that_color")


@dataclass(frozen=True)
class CacheEntry:
    key: str
    payload: ScoreResponse
    created_at: float


def make_key(description: str, target: ColorTarget) -> str:
    raw = f"{target.key_fragment()}_{(description or '').strip().lower()}"
    digest = hashlib.blake2b(raw.encode("utf-8", errors="replace"), digest_size=16).hexdigest()
    return f"score_{digest}"


class ResponseCache:
    """삽입 순서 기준으로 가장 오래된 항목부터 밀어내는 캐시.

    읽기는 순서를 바꾸지 않는다 (LRU 아님). 실패한 원격 호출은 저장하지 않으므로
    호출 측에서 성공 응답만 ``set`` 해야 한다.
    """

    def __init__(
        self,
        max_size: int = DEFAULT_CACHE_CONFIG.max_size,
        ttl_seconds: float = DEFAULT_CACHE_CONFIG.ttl_seconds,
        clock: Callable[[], float] = time.time,
    ) -> None:
        if max_size < 1:
            raise ValueError("캐시 용량은 1 이상이어야 해.")
        self.max_size = max_size
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._store: "OrderedDict[str, CacheEntry]" = OrderedDict()
        self._lock = threading.Lock()
        self.hits = 0
        self.misses = 0

    def get(self, key: str) -> Optional[ScoreResponse]:
        with self._lock:
            entry = self._store.get(key)
            if entry is None:
                self.misses += 1
                return None
            if not (isinstance(entry, CacheEntry) and isinstance(entry.payload, ScoreResponse)
                    and isinstance(entry.payload.scores, ScoreResult)):
                logger.warning("[경고] 캐시 항목 형식이 올바르지 않아 폐기: %s", key)
                del self._store[key]
                self.misses += 1
                return None
            if self._clock() - entry.created_at > self.ttl_seconds:
                del self._store[key]
                self.misses += 1
                return None
            self.hits += 1
            return entry.payload.as_cache_hit()

    def set(self, key: str, payload: ScoreResponse) -> None:
        with self._lock:
            if key in self._store:
                # 같은 키 재저장은 최신 삽입으로 취급
                del self._store[key]
            elif len(self._store) >= self.max_size:
                evicted, _ = self._store.popitem(last=False)
                logger.debug("[정보] 캐시 용량 초과로 제거: %s", evicted)
            self._store[key] = CacheEntry(key=key, payload=payload, created_at=self._clock())

    def clear(self) -> None:
        with self._lock:
            self._store.clear()
            self.hits = 0
            self.misses = 0

    def stats(self) -> Dict[str, int]:
        with self._lock:
            return {"size": len(self._store), "max_size": self.max_size, "hits": self.hits, "misses": self.misses}

    def __len__(self) -> int:
        with self._lock:
            return len(self._store)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._store
