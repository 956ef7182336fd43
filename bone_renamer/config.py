"""Configuration loading for the bone renamer.

Reads ``.bone_renamer.yml`` (or the ``.json`` variant) from the working
directory when present and merges it over the built-in defaults. YAML parsing
prefers ruamel.yaml, falls back to PyYAML, and finally tries JSON. Missing or
unreadable files yield the defaults.
"""
from __future__ import annotations

import json
from pathlib import Path
from typing import Dict, Iterable, Tuple

DEFAULT_CONFIG_PATH = ".bone_renamer.yml"

DEFAULT_EXTENSIONS: Tuple[str, ...] = (".JMA", ".JMM", ".JMO", ".JMR", ".JMT", ".JMW", ".JMZ")


def defaults() -> Dict:
    return {
        "input_dir": "animations",
        "output_dir": "converted",
        "extensions": list(DEFAULT_EXTENSIONS),
        "encoding": "utf-8",
    }


def normalize_extensions(values: Iterable[str]) -> Tuple[str, ...]:
    """Upper-case extensions and make sure each carries a leading dot."""
    out: list[str] = []
    for v in values:
        ext = str(v).strip().upper()
        if not ext:
            continue
        if not ext.startswith("."):
            ext = "." + ext
        if ext not in out:
            out.append(ext)
    return tuple(out)


def _merged(data) -> Dict:
    merged = defaults()
    if isinstance(data, dict):
        merged.update({k: v for k, v in data.items() if v is not None})
    base = defaults()
    for key in ("input_dir", "output_dir", "encoding"):
        value = str(merged.get(key) or "").strip()
        merged[key] = value or base[key]
    exts = merged.get("extensions") or DEFAULT_EXTENSIONS
    if isinstance(exts, str):
        exts = exts.split(",")
    merged["extensions"] = list(normalize_extensions(exts))
    return merged


def load_config(path: str | None = None) -> Dict:
    cfg_path = Path(path or DEFAULT_CONFIG_PATH)
    if not cfg_path.exists():
        cfg_path_json = cfg_path.with_suffix(".json")
        if not cfg_path_json.exists():
            return _merged({})
        cfg_path = cfg_path_json
    try:
        text = cfg_path.read_text(encoding="utf-8")
    except Exception:
        return _merged({})

    if cfg_path.suffix.lower() == ".json":
        try:
            return _merged(json.loads(text) or {})
        except Exception:
            return _merged({})

    # YAML via ruamel.yaml -> PyYAML -> JSON
    try:
        from ruamel.yaml import YAML  # type: ignore

        y = YAML(typ="safe")
        return _merged(y.load(text) or {})
    except Exception:
        try:
            import yaml  # type: ignore

            return _merged(yaml.safe_load(text) or {})
        except Exception:
            try:
                return _merged(json.loads(text) or {})
            except Exception:
                return _merged({})
