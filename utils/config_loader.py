"""Configuration loader that reads from .env and validates with Pydantic."""

import os
import sys
from pathlib import Path
from dotenv import load_dotenv
from pydantic import ValidationError

from models.config_models import Config, CredentialsConfig, SiteMetadata

# Environment variable -> SiteMetadata field
SITE_ENV_VARS = {
    "SITE_URL": "site_url",
    "SITE_TITLE": "title",
    "SITE_DESCRIPTION": "description",
    "SITE_BANNER": "banner",
    "SITE_HEADLINE": "headline",
    "SITE_LANGUAGE": "site_language",
    "SITE_OG_LANGUAGE": "og_language",
    "SITE_AUTHOR": "author",
    "SITE_TWITTER": "twitter",
    "SITE_FACEBOOK": "facebook",
}


def load_config() -> Config:
    """
    Load and validate configuration from environment variables.

    Reads from .env file in the project root and validates the GitHub
    credentials and site metadata using Pydantic models. Site metadata
    variables are optional; unset ones keep their defaults.

    Returns:
        Config: Validated configuration object

    Raises:
        SystemExit: If configuration is invalid or missing required fields
    """
    # Load .env file from project root
    env_path = Path(__file__).parent.parent / ".env"
    load_dotenv(dotenv_path=env_path)

    site_overrides = {
        field: os.environ[var]
        for var, field in SITE_ENV_VARS.items()
        if os.environ.get(var)
    }

    try:
        config = Config(
            credentials=CredentialsConfig(
                github_token=os.getenv("GITHUB_TOKEN", ""),
                github_username=os.getenv("GITHUB_USERNAME", ""),
            ),
            site=SiteMetadata(**site_overrides),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
        )

        return config

    except ValidationError as e:
        print("❌ Configuration validation failed:", file=sys.stderr)
        print("\nPlease check your .env file. Missing or invalid fields:", file=sys.stderr)

        for error in e.errors():
            field_path = " → ".join(str(x) for x in error["loc"])
            message = error["msg"]
            print(f"  • {field_path}: {message}", file=sys.stderr)

        print("\nHint: Copy .env.example to .env and fill in your credentials.", file=sys.stderr)
        sys.exit(1)
