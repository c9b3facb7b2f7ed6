# =============================================================================
# classroom_core/config.py
# Application configuration for Codetrio
# =============================================================================
"""
Settings are read from Streamlit secrets first and environment variables
second.

Expected secrets.toml format:
    [supabase]
    url = "https://your-project.supabase.co"
    key = "your-anon-key"

    [app]
    site_url = "https://codetrio.streamlit.app/"
    log_level = "INFO"
    log_to_file = true
    demo_email = "ntq.145@gmail.com"     # optional, shown on the sign-in page
    demo_password = "123456"
"""
from __future__ import annotations
import logging
import os
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Tuple

import streamlit as st

from classroom_core.errors import ConfigurationError


DEFAULT_SITE_URL = "http://localhost:8501/"
APP_NAME = "Codetrio"


@dataclass(frozen=True)
class AppConfig:
    supabase_url: str
    supabase_key: str
    site_url: str = DEFAULT_SITE_URL
    app_name: str = APP_NAME
    log_level: str = "INFO"
    log_to_file: bool = True
    demo_email: Optional[str] = None
    demo_password: Optional[str] = None

    @property
    def log_level_value(self) -> int:
        """Numeric logging level; unknown names fall back to INFO."""
        value = logging.getLevelName(self.log_level.upper())
        return value if isinstance(value, int) else logging.INFO

    @property
    def demo_account(self) -> Optional[Tuple[str, str]]:
        """Demo credentials to advertise, only when both are configured."""
        if self.demo_email and self.demo_password:
            return self.demo_email, self.demo_password
        return None


def _read_secrets() -> Mapping[str, Any]:
    # st.secrets raises when no secrets.toml exists at all
    try:
        return {key: st.secrets[key] for key in st.secrets}
    except Exception:
        return {}


def _as_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in ("1", "true", "yes", "on")


def load_config(
    secrets: Optional[Mapping[str, Any]] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> AppConfig:
    """
    Build the application configuration.

    Args:
        secrets: Secrets mapping (defaults to ``st.secrets``)
        environ: Environment mapping (defaults to ``os.environ``)

    Raises:
        ConfigurationError: when the Supabase URL or key is missing
    """
    secrets = _read_secrets() if secrets is None else secrets
    environ = os.environ if environ is None else environ

    supabase = dict(secrets.get("supabase", {}) or {})
    app = dict(secrets.get("app", {}) or {})

    url = supabase.get("url") or environ.get("SUPABASE_URL")
    key = supabase.get("key") or environ.get("SUPABASE_KEY")

    if not url:
        raise ConfigurationError(
            "Supabase URL is not configured (secrets [supabase].url or SUPABASE_URL)",
            config_key="supabase.url",
        )
    if not key:
        raise ConfigurationError(
            "Supabase key is not configured (secrets [supabase].key or SUPABASE_KEY)",
            config_key="supabase.key",
        )

    site_url = app.get("site_url") or environ.get("CODETRIO_SITE_URL") or DEFAULT_SITE_URL
    if not site_url.endswith("/"):
        site_url += "/"

    return AppConfig(
        supabase_url=url,
        supabase_key=key,
        site_url=site_url,
        log_level=str(app.get("log_level") or environ.get("CODETRIO_LOG_LEVEL") or "INFO"),
        log_to_file=_as_bool(app.get("log_to_file", environ.get("CODETRIO_LOG_TO_FILE", True))),
        demo_email=app.get("demo_email") or environ.get("CODETRIO_DEMO_EMAIL") or None,
        demo_password=app.get("demo_password") or environ.get("CODETRIO_DEMO_PASSWORD") or None,
    )


@st.cache_resource
def get_app_config() -> AppConfig:
    """Configuration shared by every browser session of this process."""
    return load_config()
