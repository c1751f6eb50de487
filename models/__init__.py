"""Data models for the portfolio site."""

from models.config_models import Config, CredentialsConfig, SiteMetadata
from models.data_models import NavLink, PrimaryLanguage, RepositorySummary, ShowcaseState

__all__ = [
    "Config",
    "CredentialsConfig",
    "SiteMetadata",
    "NavLink",
    "PrimaryLanguage",
    "RepositorySummary",
    "ShowcaseState",
]
