"""
Turn .env values into the manifest placeholder map.

The Android build hands this map to manifest templating, where
${KAKAO_NATIVE_APP_KEY} and friends are substituted at package time.
"""

import os
import sys
from enum import Enum
from typing import Callable, Iterable, Mapping

from .load_env import KAKAO_NATIVE_APP_KEY, load, lookup


class PlaceholderMode(str, Enum):
    MERGE = 'merge'      # update the existing store, keep other entries
    REPLACE = 'replace'  # new store with only the resolved entries


def warn(message: str) -> None:
    # stdout carries the placeholder map
    print(message, file=sys.stderr)


def blank_warning(key: str, env_path: str | os.PathLike) -> str:
    return f"[WARN] {key} is blank. Check {env_path}"


def inject_placeholders(store: dict[str, str] | None, entries: Mapping[str, str],
                        mode: PlaceholderMode) -> dict[str, str]:
    """
    Put entries into a placeholder store.

    MERGE mutates and returns store itself. REPLACE leaves store alone and
    returns a fresh dict holding only entries, so anything other build logic
    set before is gone from the result.
    """
    mode = PlaceholderMode(mode)
    if mode is PlaceholderMode.REPLACE:
        return dict(entries)
    if store is None:
        store = {}
    store.update(entries)
    return store


def apply_env(env: Mapping[str, str], keys: Iterable[str], store: dict[str, str] | None,
              mode: PlaceholderMode, env_path: str | os.PathLike,
              warn: Callable[[str], None] = warn) -> dict[str, str]:
    """Look up each key in an already loaded env and inject the results."""
    entries = {}
    for key in keys:
        value = lookup(env, key, '')
        if not value.strip():
            warn(blank_warning(key, env_path))
        entries[key] = value
    return inject_placeholders(store, entries, mode)


def resolve_placeholders(env_path: str | os.PathLike,
                         keys: Iterable[str] = (KAKAO_NATIVE_APP_KEY,),
                         store: dict[str, str] | None = None,
                         mode: PlaceholderMode = PlaceholderMode.MERGE,
                         display_path: str | None = None,
                         warn: Callable[[str], None] = warn) -> dict[str, str]:
    """
    Load env_path, look up each key and inject it into store.

    Args:
        env_path: Path to the .env file (need not exist)
        keys: Keys to resolve; each becomes a placeholder of the same name
        store: Placeholders already set by other build logic
        mode: Merge into store or replace it
        display_path: Path shown in warnings (default: env_path)
        warn: Called once per key whose value is blank

    Returns the resulting placeholder store. Never fails on missing or
    incomplete configuration; the build goes on with empty values.
    """
    return apply_env(load(env_path), keys, store, mode, display_path or env_path, warn)
