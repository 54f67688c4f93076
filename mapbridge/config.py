from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Dict, Optional

from mapbridge.services.patcher import END_TAG, START_TAG

_PKG_DIR = Path(__file__).resolve().parent
_INDEX_FILE = "game_engine_web.html"
_SCRIPT_REL = Path("resources") / "component_types" / "GameManager.lua"


def _normalize_path(raw: str) -> Path:
    """
    Expand ~ and relative paths to an absolute Path.
    """
    path = Path(raw).expanduser()
    if not path.is_absolute():
        path = Path.cwd() / path
    return path


def discover_root_dir() -> Path:
    """Primer candidato existente; si ninguno existe, el del paquete."""
    candidates = [
        _PKG_DIR / "frontend",          # mapbridge/frontend
        _PKG_DIR.parent / "frontend",   # <repo>/frontend
        Path.cwd(),                     # fallback
    ]
    for c in candidates:
        if (c / _INDEX_FILE).exists():
            return c
    return candidates[0]


def load_config(environ: Optional[Dict[str, str]] = None) -> Dict[str, Any]:
    """
    Resolve MAPBRIDGE_* environment variables into Flask config keys.
    - ROOT_DIR: static root (MAPBRIDGE_ROOT_DIR or discovered frontend dir).
    - SCRIPT_PATH: defaults to ROOT_DIR/resources/component_types/GameManager.lua.
    - START_TAG / END_TAG: region markers, fixed for the process lifetime.
    """
    env = os.environ if environ is None else environ

    raw_root = (env.get("MAPBRIDGE_ROOT_DIR") or "").strip()
    root = _normalize_path(raw_root) if raw_root else discover_root_dir()

    raw_script = (env.get("MAPBRIDGE_SCRIPT_PATH") or "").strip()
    script = _normalize_path(raw_script) if raw_script else root / _SCRIPT_REL

    return {
        "ROOT_DIR": str(root),
        "INDEX_FILE": (env.get("MAPBRIDGE_INDEX_FILE") or _INDEX_FILE).strip(),
        "SCRIPT_PATH": str(script),
        "START_TAG": env.get("MAPBRIDGE_START_TAG") or START_TAG,
        "END_TAG": env.get("MAPBRIDGE_END_TAG") or END_TAG,
    }
