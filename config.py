"""
config.py — Konfiguracja przez zmienne środowiskowe.
Wszystkie zmienne mają prefiks LOGIC_TRACE_.
"""
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Logging
    log_level: str = "INFO"

    # Kompatybilność ze starym formatem śladu (patrz DESIGN.md)
    legacy_ref_index: bool = False
    zero_as_unbound: bool = False

    # Wypisywanie śladu każdej ewaluacji na stdout
    verbose: bool = False

    model_config = SettingsConfigDict(env_prefix="LOGIC_TRACE_", env_file=".env", extra="ignore")
