"""In-process response cache for public content endpoints and the invalidation dispatcher that keeps it fresh."""

import logging
import threading
import time
from typing import Any, Callable, Dict, Iterable, List, Optional, Tuple

import httpx

from portfolio.config import settings
from portfolio.utils.errors import ValidationError

logger = logging.getLogger(__name__)

# Content type -> pages/endpoints that embed it.
INVALIDATION_TARGETS: Dict[str, Tuple[str, ...]] = {
    "hero": ("/api/hero", "/"),
    "about": ("/api/about", "/"),
    "expertise": ("/api/expertise", "/"),
    "navigation": ("/api/navigation", "/", "/projects"),
    "projects": ("/api/projects", "/api/projects/featured", "/", "/projects"),
}

# Endpoint path -> content type it serves.
ENDPOINT_CONTENT_TYPES: Dict[str, str] = {
    "/api/hero": "hero",
    "/api/about": "about",
    "/api/expertise": "expertise",
    "/api/navigation": "navigation",
    "/api/projects": "projects",
    "/api/projects/featured": "projects",
}


class ResponseCache:
    def __init__(self, ttl_seconds: int = 3600, clock: Callable[[], float] = time.monotonic):
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._entries: Dict[str, Tuple[float, Any]] = {}
        # bumped by delete/clear so a load started before an invalidation is not stored
        self._generations: Dict[str, int] = {}
        self._epoch = 0
        self._lock = threading.Lock()

    def _version(self, key: str) -> Tuple[int, int]:
        return self._epoch, self._generations.get(key, 0)

    def get(self, key: str) -> Optional[Any]:
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None
            stored_at, value = entry
            if self._clock() - stored_at > self.ttl_seconds:
                del self._entries[key]
                return None
            return value

    def set(self, key: str, value: Any) -> None:
        with self._lock:
            self._entries[key] = (self._clock(), value)

    def get_or_set(self, key: str, loader: Callable[[], Any]) -> Any:
        value = self.get(key)
        if value is not None:
            return value
        with self._lock:
            version = self._version(key)
        value = loader()
        with self._lock:
            if self._version(key) == version:
                self._entries[key] = (self._clock(), value)
        return value

    def delete(self, key: str) -> bool:
        with self._lock:
            self._generations[key] = self._generations.get(key, 0) + 1
            return self._entries.pop(key, None) is not None

    def keys(self) -> List[str]:
        with self._lock:
            return list(self._entries)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()
            self._generations.clear()
            self._epoch += 1


class RevalidationDispatcher:
    """Fans an invalidation out to each target independently; one failing target never blocks the rest."""

    def __init__(
        self,
        cache: ResponseCache,
        webhook_url: str = "",
        webhook_secret: str = "",
        timeout: float = 15.0,
    ):
        self.cache = cache
        self.webhook_url = webhook_url
        self.webhook_secret = webhook_secret
        self.timeout = timeout

    def _notify_webhook(self, target: str) -> None:
        headers = {"x-revalidate-secret": self.webhook_secret} if self.webhook_secret else {}
        response = httpx.post(self.webhook_url, json={"path": target}, headers=headers, timeout=self.timeout)
        response.raise_for_status()

    def _dispatch(self, targets: Iterable[str]) -> List[str]:
        invalidated: List[str] = []
        for target in dict.fromkeys(targets):
            try:
                self.cache.delete(target)
            except Exception as exc:
                logger.warning("[cache] failed to invalidate %s: %s", target, exc)
                continue
            invalidated.append(target)
            if self.webhook_url:
                try:
                    self._notify_webhook(target)
                except httpx.HTTPError as exc:
                    logger.warning("[cache] revalidation webhook failed for %s: %s", target, exc)
        return invalidated

    def invalidate(self, content_type: str, extra_targets: Iterable[str] = ()) -> List[str]:
        if content_type not in INVALIDATION_TARGETS:
            raise ValidationError.for_field("tag", f"unknown content type '{content_type}'")
        return self._dispatch([*INVALIDATION_TARGETS[content_type], *extra_targets])

    def invalidate_path(self, path: str, force: bool = False) -> List[str]:
        content_type = ENDPOINT_CONTENT_TYPES.get(path)
        targets = list(INVALIDATION_TARGETS[content_type]) if content_type else [path]
        if path not in targets:
            targets.insert(0, path)
        if force:
            # also drop nested entries such as /api/projects/<slug>
            targets.extend(key for key in self.cache.keys() if key.startswith(path.rstrip("/") + "/"))
        return self._dispatch(targets)

    def invalidate_all(self) -> List[str]:
        targets = [target for targets in INVALIDATION_TARGETS.values() for target in targets]
        invalidated = self._dispatch(targets)
        self.cache.clear()
        return invalidated


response_cache = ResponseCache(ttl_seconds=settings.CACHE_TTL_SECONDS)


def get_dispatcher() -> RevalidationDispatcher:
    return RevalidationDispatcher(
        response_cache,
        webhook_url=settings.REVALIDATE_WEBHOOK_URL,
        webhook_secret=settings.REVALIDATE_WEBHOOK_SECRET,
        timeout=float(settings.STORAGE_TIMEOUT_SECONDS),
    )
