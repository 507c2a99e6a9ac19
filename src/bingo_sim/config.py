from __future__ import annotations

import hashlib
import json
import os
from pathlib import Path
from typing import Any, Dict, Mapping, Set, Tuple

import yaml

ENV_PREFIX = "BINGO_SIM_"

PATH_KEYS = ("input", "out_report", "log_file")
CONTRACT_KEYS = ("input",)


def _read_config_file(config_path: Path | None) -> Dict[str, Any]:
    if not config_path:
        return {}
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")
    suffix = config_path.suffix.lower()
    text = config_path.read_text(encoding="utf-8")
    if suffix in (".yaml", ".yml"):
        data = yaml.safe_load(text) or {}
        if not isinstance(data, dict):
            raise ValueError("Top-level YAML config must be a mapping")
        return data
    if suffix == ".json":
        data = json.loads(text)
        if not isinstance(data, dict):
            raise ValueError("Top-level JSON config must be a mapping")
        return data
    raise ValueError(f"Unsupported config extension: {suffix}")


def _collect_env_vars(env: Mapping[str, str]) -> Dict[str, Any]:
    """Map BINGO_SIM_* environment variables to config keys.

    Explicit map; unknown variables are ignored.
    """
    mapping: Dict[str, str] = {
        f"{ENV_PREFIX}INPUT": "input",
        f"{ENV_PREFIX}OUT_REPORT": "out_report",
        f"{ENV_PREFIX}COLORS": "colors",
        f"{ENV_PREFIX}LOG_LEVEL": "log_level",
        f"{ENV_PREFIX}LOG_FORMAT": "log_format",
        f"{ENV_PREFIX}LOG_FILE": "log_file",
    }
    return {cfg_key: env[env_key] for env_key, cfg_key in mapping.items() if env_key in env}


def _apply_overrides(base: Dict[str, Any], overrides: Mapping[str, Any]) -> Dict[str, Any]:
    merged: Dict[str, Any] = json.loads(json.dumps(base))  # deep copy via JSON
    for key, value in overrides.items():
        if value is not None:
            merged[key] = value
    return merged


def canonical_json_dumps(data: Any) -> str:
    return json.dumps(data, ensure_ascii=True, sort_keys=True, separators=(",", ":"))


def compute_params_hash(resolved: Mapping[str, Any]) -> str:
    """Hash of the settings that determine the answers.

    Logging and output options are excluded.
    """
    contract = {key: resolved[key] for key in CONTRACT_KEYS if key in resolved}
    digest = hashlib.sha256(canonical_json_dumps(contract).encode("utf-8")).hexdigest()
    return f"sha256:{digest}"


def resolve_paths(
    resolved: Dict[str, Any],
    config_file: Path | None,
    config_keys: Set[str],
) -> Dict[str, Any]:
    """Normalize paths.

    - Paths from config file: relative to the config directory
    - Paths from CLI, ENV or defaults: relative to CWD
    """
    cwd = Path.cwd()
    cfg_dir = config_file.parent if config_file else None

    def normalize(path_value: str, from_config: bool) -> str:
        p = Path(path_value)
        if p.is_absolute():
            return str(p)
        base = (cfg_dir or cwd) if from_config else cwd
        return str((base / p).resolve())

    result = dict(resolved)
    for key in PATH_KEYS:
        value = resolved.get(key)
        if value is None or value == "":
            result[key] = None
            continue
        result[key] = normalize(str(value), key in config_keys)
    return result


def resolve_parameters(
    *,
    config_path_str: str | None,
    cli_overrides: Mapping[str, Any],
    env: Mapping[str, str] | None = None,
) -> Tuple[Dict[str, Any], str, Path | None]:
    """Resolve parameters with precedence CLI > ENV > config > defaults.

    Returns (resolved_params, params_hash, config_path)
    """
    config_path = Path(config_path_str).resolve() if config_path_str else None
    file_cfg = _read_config_file(config_path) if config_path else {}
    env_map = _collect_env_vars(os.environ if env is None else env)

    defaults: Dict[str, Any] = {
        "input": "input.txt",
        "out_report": None,
        "colors": "auto",
        "log_level": "INFO",
        "log_format": "text",
        "log_file": None,
    }

    merged = _apply_overrides(defaults, file_cfg)
    merged = _apply_overrides(merged, env_map)
    merged = _apply_overrides(merged, cli_overrides)

    cli_keys = {k for k, v in cli_overrides.items() if v is not None}
    config_keys = set(file_cfg) - set(env_map) - cli_keys
    merged = resolve_paths(merged, config_path, config_keys)

    params_hash = compute_params_hash(merged)
    return merged, params_hash, config_path
