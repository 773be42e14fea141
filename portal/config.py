# portal/config.py

import os
from dataclasses import dataclass
from pathlib import Path

import streamlit as st


DEFAULT_PASSWORD = "veloce"  # change this password
DEFAULT_STORAGE_KEY = "veloceCredentials"
DEFAULT_STORAGE_PATH = Path(".streamlit") / "local_storage.json"


@dataclass(frozen=True)
class Settings:
    app_password: str = DEFAULT_PASSWORD
    storage_key: str = DEFAULT_STORAGE_KEY
    storage_path: Path = DEFAULT_STORAGE_PATH


def get_setting(name, default=None, secrets=None):
    """Look a setting up in Streamlit secrets, then the environment."""
    if secrets is None:
        secrets = st.secrets
    try:
        value = secrets.get(name)
    except FileNotFoundError:
        # no secrets.toml at all
        value = None
    if value is None:
        value = os.environ.get(name)
    return default if value is None else value


def load_settings(secrets=None) -> Settings:
    return Settings(
        app_password=str(get_setting("APP_PASSWORD", DEFAULT_PASSWORD, secrets)),
        storage_key=str(get_setting("STORAGE_KEY", DEFAULT_STORAGE_KEY, secrets)),
        storage_path=Path(get_setting("STORAGE_PATH", DEFAULT_STORAGE_PATH, secrets)),
    )
