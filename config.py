from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ROOT_DIR = Path(__file__).resolve().parent
load_dotenv(dotenv_path=ROOT_DIR / ".env")


def _get_env(*keys: str, default: str | None = None) -> str | None:
    for k in keys:
        v = os.getenv(k)
        if v is not None and str(v).strip() != "":
            return v.strip()
    return default


def _get_int(*keys: str, default: int | None = None) -> int | None:
    v = _get_env(*keys, default=None)
    if v is None:
        return default
    return int(v)


def _get_float(*keys: str, default: float | None = None) -> float | None:
    v = _get_env(*keys, default=None)
    if v is None:
        return default
    return float(v)


@dataclass(frozen=True)
class Settings:
    shipping_fee: float
    log_dir: str
    log_level: str
    log_backups: int


def load_settings() -> Settings:
    s = Settings(
        shipping_fee=_get_float("POS_SHIPPING_FEE", "SHIPPING_FEE", default=30.0),
        log_dir=_get_env("POS_LOG_DIR", default="data/logs") or "data/logs",
        log_level=(_get_env("POS_LOG_LEVEL", "LOG_LEVEL", default="INFO") or "INFO").upper(),
        log_backups=_get_int("POS_LOG_BACKUPS", default=7),
    )
    if s.shipping_fee < 0:
        raise RuntimeError("POS_SHIPPING_FEE must not be negative")
    return s


settings = load_settings()
