"""Resolve Android manifest placeholders from a local .env file."""

from .load_env import (
    DEFAULT_ENV_PATH,
    KAKAO_NATIVE_APP_KEY,
    EnvLoadResult,
    load,
    load_with_report,
    lookup,
    parse_env_lines,
)
from .placeholders import (
    PlaceholderMode,
    apply_env,
    blank_warning,
    inject_placeholders,
    resolve_placeholders,
)

__version__ = '0.1.0'
