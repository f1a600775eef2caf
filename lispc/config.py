from __future__ import annotations
import os
from pathlib import Path
from typing import Optional


_DEFAULT_PROMPT = 'lispc> '
_DEFAULT_HISTORY_FILE = Path.home() / '.lispc_history'
_DEFAULT_LOG_LEVEL = 'WARNING'


def get_prompt() -> str:
    return os.environ.get('LISPC_PROMPT', _DEFAULT_PROMPT)


def get_history_file() -> Optional[Path]:
    # An explicitly empty value disables history persistence
    raw = os.environ.get('LISPC_HISTORY_FILE')
    if raw is None:
        return _DEFAULT_HISTORY_FILE
    raw = raw.strip()
    return Path(raw).expanduser() if raw else None


def get_prelude_path() -> Optional[Path]:
    raw = os.environ.get('LISPC_PRELUDE_PATH', '').strip()
    return Path(raw).expanduser() if raw else None


def get_log_level() -> str:
    return os.environ.get('LISPC_LOG_LEVEL', _DEFAULT_LOG_LEVEL).strip().upper() or _DEFAULT_LOG_LEVEL
