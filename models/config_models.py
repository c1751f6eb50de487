"""Configuration models for validation using Pydantic."""

import re

from pydantic import BaseModel, Field, field_validator

# GitHub logins: alphanumerics and single hyphens, no leading/trailing hyphen
GITHUB_LOGIN_PATTERN = re.compile(r"^[A-Za-z0-9](?:[A-Za-z0-9]|-(?=[A-Za-z0-9])){0,38}$")


class CredentialsConfig(BaseModel):
    """GitHub credentials loaded from environment variables."""

    github_token: str = Field(..., min_length=1, description="GitHub personal access token (GraphQL API)")
    github_username: str = Field(..., min_length=1, description="Account whose pinned repositories are shown")

    @field_validator("github_token")
    @classmethod
    def validate_github_token(cls, v: str) -> str:
        """Validate GitHub token is set."""
        if not v or v == "ghp_your_token_here":
            raise ValueError("GitHub token must be set in .env file")
        return v

    @field_validator("github_username")
    @classmethod
    def validate_github_username(cls, v: str) -> str:
        """Validate the account name is a legal GitHub login."""
        if not GITHUB_LOGIN_PATTERN.match(v):
            raise ValueError(
                "GitHub username must contain only letters, digits and single hyphens "
                "(max 39 characters)"
            )
        return v


class SiteMetadata(BaseModel):
    """Static site metadata used by the SEO head and page chrome."""

    site_url: str = Field(default="https://example.com", description="Canonical site URL")
    title: str = Field(default="Portfolio", description="Default page title")
    description: str = Field(
        default="I'm a Software Engineer who loves solving real world problems.",
        description="Default page description",
    )
    banner: str = Field(default="/images/banner.png", description="Default share image path")
    headline: str = Field(default="Software Engineer", description="schema.org headline")
    site_language: str = Field(default="en", description="<html lang> value")
    og_language: str = Field(default="en_US", description="Open Graph locale")
    author: str = Field(default="Portfolio Owner", description="Site author")
    twitter: str = Field(default="", description="Twitter handle, without @")
    facebook: str = Field(default="", description="Open Graph site name")
    build_time: str = Field(default="", description="Build date (YYYY-MM-DD), set at render time if empty")

    @field_validator("site_url")
    @classmethod
    def validate_site_url(cls, v: str) -> str:
        """Validate site URL format and strip the trailing slash."""
        if not v.startswith(("http://", "https://")):
            raise ValueError("Site URL must start with http:// or https://")
        return v.rstrip("/")


class Config(BaseModel):
    """Application configuration."""

    credentials: CredentialsConfig
    site: SiteMetadata = Field(default_factory=SiteMetadata)
    log_level: str = Field(default="INFO", description="Logging level")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is one of the standard levels."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(f"Log level must be one of: {', '.join(valid_levels)}")
        return v_upper
