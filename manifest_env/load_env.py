"""
Read KEY=VALUE pairs from a .env file.

Blank lines and '#' comments are ignored, lines without '=' are dropped, and
only the first '=' splits key from value. No quoting or expansion.
"""

import os
from dataclasses import dataclass, field
from typing import Iterable, Mapping

# Relative to the Android app module, the Flutter project root holds .env
DEFAULT_ENV_PATH = '../.env'
KAKAO_NATIVE_APP_KEY = 'KAKAO_NATIVE_APP_KEY'


@dataclass
class EnvLoadResult:
    values: dict[str, str] = field(default_factory=dict)
    found: bool = True
    skipped: list[int] = field(default_factory=list)  # 1-based line numbers

    @property
    def skipped_count(self) -> int:
        return len(self.skipped)


def parse_env_lines(lines: Iterable[str]) -> EnvLoadResult:
    """Parse .env lines, consuming the iterable once. Last duplicate key wins."""
    result = EnvLoadResult()
    for lineno, line in enumerate(lines, start=1):
        line = line.strip()
        if not line or line.startswith('#'):
            continue
        if '=' not in line:
            result.skipped.append(lineno)
            continue
        key, value = line.split('=', 1)
        key = key.strip()
        if not key:
            result.skipped.append(lineno)
            continue
        result.values[key] = value.strip()
    return result


def load_with_report(path: str | os.PathLike) -> EnvLoadResult:
    """
    Load an env file and report what was skipped.

    A missing file is not an error: it yields an empty result with
    found=False.
    """
    if not os.path.exists(path):
        return EnvLoadResult(found=False)
    # undecodable bytes become U+FFFD rather than failing the build
    with open(path, encoding='utf-8', errors='replace') as f:
        return parse_env_lines(f)


def load(path: str | os.PathLike) -> dict[str, str]:
    """Load an env file into a dict. Returns {} if the file does not exist."""
    return load_with_report(path).values


def lookup(mapping: Mapping[str, str], key: str, default: str = '') -> str:
    return mapping[key] if key in mapping else default
