"""
Простой загрузчик/сохранитель конфигурации загрузчика в формате JSON.
Если файл не найден – используются настройки по‑умолчанию
(файл на диск не пишется, пока не вызван `save()`).
"""

import copy
import json
import os
from pathlib import Path

from objmodel.utils.logger import logger, set_log_level

CONFIG_ENV_VAR = "OBJMODEL_CONFIG"

DEFAULT_CONFIG = {
    "encoding": "utf-8",
    "default_texcoord": [0.0, 0.0],
    "default_normal": [0.0, 0.0, 1.0],
    "log_level": "INFO",
}


class Config:
    """Singleton‑подобный объект конфигурации."""
    _instance = None

    def __new__(cls, path: str = None):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance.path = Path(path or os.environ.get(CONFIG_ENV_VAR, "objmodel.json"))
            cls._instance._load()
        return cls._instance

    @classmethod
    def reset(cls):
        """Забыть текущий экземпляр (следующий `Config()` перечитает файл)."""
        cls._instance = None

    def _load(self):
        self.data = copy.deepcopy(DEFAULT_CONFIG)
        if not self.path.is_file():
            logger.debug(f"[Config] No config file at {self.path} – using defaults.")
            return
        try:
            with self.path.open("r", encoding="utf-8") as f:
                self.data.update(json.load(f))
            logger.info(f"[Config] Loaded configuration from {self.path}.")
        except (OSError, TypeError, ValueError) as exc:
            logger.error(f"[Config] Failed to read config: {exc}")
        set_log_level(self.data.get("log_level", DEFAULT_CONFIG["log_level"]))

    def save(self):
        try:
            with self.path.open("w", encoding="utf-8") as f:
                json.dump(self.data, f, indent=4)
            logger.info("[Config] Configuration saved.")
        except OSError as exc:
            logger.error(f"[Config] Unable to save config: {exc}")

    def __getitem__(self, key):
        return self.data.get(key, DEFAULT_CONFIG.get(key))

    def __setitem__(self, key, value):
        self.data[key] = value

    def get(self, key, default=None):
        return self.data.get(key, default)
