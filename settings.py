# settings.py
from __future__ import annotations

import os
from dataclasses import dataclass, fields
from typing import Any, Optional

import yaml  # type: ignore[import-untyped]

CONFIG_ENV = "NOTEBOOK_CONFIG"


@dataclass
class Settings:
    host: str = "127.0.0.1"
    port: int = 8000
    dummy_notes: int = 0  # сколько тестовых заметок добавить при старте
    log_level: str = "INFO"


def _read_yaml(path: str) -> dict[str, Any]:
    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError("YAML config must be a mapping (key: value).")
    return data


def load_settings(path: Optional[str] = None) -> Settings:
    """
    Настройки по умолчанию, перекрытые YAML-файлом.
    Путь: аргумент или переменная окружения NOTEBOOK_CONFIG; нет файла, дефолты.
    """
    path = path or os.environ.get(CONFIG_ENV)
    if not path or not os.path.exists(path):
        return Settings()

    data = _read_yaml(path)
    known = {f.name for f in fields(Settings)}
    unknown = sorted(set(data) - set(known))
    if unknown:
        raise ValueError("Unknown config keys: " + ", ".join(unknown))

    values: dict[str, Any] = {}
    for key, raw in data.items():
        if key in ("port", "dummy_notes"):
            try:
                values[key] = int(raw)
            except (TypeError, ValueError):
                raise ValueError(f"Config key '{key}' must be an integer.") from None
        else:
            values[key] = str(raw)

    if values.get("dummy_notes", 0) < 0:
        raise ValueError("Config key 'dummy_notes' must not be negative.")
    if "log_level" in values:
        values["log_level"] = values["log_level"].upper()
    return Settings(**values)
