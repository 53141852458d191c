"""
Profile store for InvestIQ.

PURPOSE:
- Explicit load/save interface for user financial profiles, injected into the
  Agent instead of shared global cache state.
- Cache-first reads with an authoritative DynamoDB fallback.

CONTEXT:
- LocalCacheStore keeps one JSON file per user (fast, local, may be corrupt).
- DynamoProfileStore is the slower authoritative copy.
- CachedProfileStore composes the two; remote problems are logged, never raised.
"""

from __future__ import annotations
import json
import os
import pathlib
from datetime import datetime, timezone
from typing import Optional

import structlog

from investiq.model_interface.types import FinancialProfile
from investiq.tools import dynamodb_tool as ddb

log = structlog.get_logger(__name__)

# Directory for the local profile cache.
DEFAULT_CACHE_DIR = os.getenv("PROFILE_CACHE_DIR", ".profile_cache")


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="seconds")


def stamp(profile: FinancialProfile, user_id: str) -> FinancialProfile:
    """
    Attach record metadata before saving.

    returns:
    - FinancialProfile – same answers with user_id set, created_at kept if present,
      and updated_at refreshed.
    """
    now = _now_iso()
    data = profile.to_dict()
    data["userId"] = user_id
    data["createdAt"] = profile.created_at or now
    data["updatedAt"] = now
    return FinancialProfile.from_dict(data)


class ProfileStore:
    def load(self, user_id: str) -> Optional[FinancialProfile]:
        raise NotImplementedError

    def save(self, profile: FinancialProfile) -> bool:
        raise NotImplementedError


class LocalCacheStore(ProfileStore):
    """One JSON file per user under `directory`, named userProfile_<user_id>.json."""

    def __init__(self, directory: str = DEFAULT_CACHE_DIR):
        self.directory = pathlib.Path(directory)

    def _path(self, user_id: str) -> pathlib.Path:
        safe = "".join(ch if ch.isalnum() or ch in "-_." else "_" for ch in user_id)
        return self.directory / f"userProfile_{safe}.json"

    def load(self, user_id: str) -> Optional[FinancialProfile]:
        """
        Read a cached profile.

        returns:
        - FinancialProfile or None – None when absent or corrupt.

        notes:
        - Corrupt entries (invalid JSON or not an object) are deleted so the
          next read falls through to the remote store cleanly.
        """
        p = self._path(user_id)
        if not p.exists():
            return None
        try:
            data = json.loads(p.read_text(encoding="utf-8"))
            if not isinstance(data, dict):
                raise ValueError("cached profile is not an object")
        except ValueError as e:
            log.warning("profile.cache_corrupt", user_id=user_id, error=str(e))
            p.unlink(missing_ok=True)
            return None
        return FinancialProfile.from_dict(data)

    def save(self, profile: FinancialProfile) -> bool:
        if not profile.user_id:
            return False
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
            self._path(profile.user_id).write_text(json.dumps(profile.to_dict()), encoding="utf-8")
        except OSError as e:
            log.error("profile.cache_write_failed", user_id=profile.user_id, error=str(e))
            return False
        return True


class DynamoProfileStore(ProfileStore):
    """Authoritative store: items {"user_id": ..., "profile": {...}} in DynamoDB."""

    def load(self, user_id: str) -> Optional[FinancialProfile]:
        item = ddb.get_item(user_id)
        if not item or not isinstance(item.get("profile"), dict):
            return None
        return FinancialProfile.from_dict(item["profile"])

    def save(self, profile: FinancialProfile) -> bool:
        if not profile.user_id:
            return False
        ddb.put_item({"user_id": profile.user_id, "profile": profile.to_dict()})
        return True


class CachedProfileStore(ProfileStore):
    """
    Cache-first composition.

    flow (load):
    1) Try the cache.
    2) On a miss, try the remote store; a hit is written back to the cache.
    3) Remote errors are logged and read as "not found".

    flow (save):
    1) Write the cache first (fast path the UI relies on).
    2) Then the remote store; a failure is logged and reflected in last_remote_ok.
    """

    def __init__(self, cache: ProfileStore, remote: Optional[ProfileStore] = None):
        self.cache = cache
        self.remote = remote
        self.last_source: Optional[str] = None
        self.last_remote_ok: Optional[bool] = None

    def load(self, user_id: str) -> Optional[FinancialProfile]:
        profile = self.cache.load(user_id)
        if profile is not None:
            self.last_source = "cache"
            return profile

        log.info("profile.cache_miss", user_id=user_id)
        self.last_source = None
        if self.remote is None:
            return None
        try:
            profile = self.remote.load(user_id)
        except Exception as e:
            log.warning("profile.remote_load_failed", user_id=user_id, error=str(e))
            return None
        if profile is not None:
            self.last_source = "remote"
            self.cache.save(profile)
        return profile

    def save(self, profile: FinancialProfile) -> bool:
        cached = self.cache.save(profile)
        if self.remote is None:
            self.last_remote_ok = None
            return cached
        try:
            self.last_remote_ok = bool(self.remote.save(profile))
        except Exception as e:
            log.warning("profile.remote_save_failed", user_id=profile.user_id, error=str(e))
            self.last_remote_ok = False
        return cached or self.last_remote_ok


def default_store() -> ProfileStore:
    """Local cache, backed by DynamoDB when USE_DYNAMODB=1."""
    cache = LocalCacheStore(os.getenv("PROFILE_CACHE_DIR", DEFAULT_CACHE_DIR))
    remote = DynamoProfileStore() if os.getenv("USE_DYNAMODB", "0") == "1" else None
    return CachedProfileStore(cache, remote)
