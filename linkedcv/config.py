"""YAML config loading and validation."""

import os
from dataclasses import dataclass, field
from pathlib import Path

import yaml

DEFAULT_LOOKUP_ENDPOINT = "https://nubela.co/proxycurl/api/v2/linkedin"


@dataclass
class ApiKeys:
    proxycurl_api_key: str = ""
    openai_api_key: str = ""


@dataclass
class LookupConfig:
    endpoint: str = DEFAULT_LOOKUP_ENDPOINT
    timeout: int = 30
    max_retries: int = 3


@dataclass
class ParserConfig:
    model: str = "gpt-4o-mini"
    max_tokens: int = 2048
    temperature: float = 0.0


@dataclass
class WebConfig:
    host: str = "127.0.0.1"
    port: int = 8000


@dataclass
class AppConfig:
    api_keys: ApiKeys = field(default_factory=ApiKeys)
    lookup: LookupConfig = field(default_factory=LookupConfig)
    parser: ParserConfig = field(default_factory=ParserConfig)
    web: WebConfig = field(default_factory=WebConfig)
    log_dir: str = "logs"


def load_config(config_path: str = "config.yaml") -> AppConfig:
    """Load configuration from a YAML file."""
    path = Path(config_path)
    if not path.exists():
        raise FileNotFoundError(
            f"Config file not found: {config_path}\n"
            "Copy config.example.yaml to config.yaml and fill in your settings."
        )

    with open(path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}

    return _build_config(raw)


def load_config_or_default(config_path: str = "config.yaml") -> AppConfig:
    """Like load_config, but fall back to defaults (plus env keys) if the file is missing."""
    if not Path(config_path).exists():
        return _build_config({})
    return load_config(config_path)


def _build_config(raw: dict) -> AppConfig:
    config = AppConfig()

    # API keys (env vars take precedence)
    keys_raw = raw.get("api_keys") or {}
    config.api_keys = ApiKeys(
        proxycurl_api_key=os.environ.get("PROXYCURL_API_KEY", keys_raw.get("proxycurl_api_key", "")),
        openai_api_key=os.environ.get("OPENAI_API_KEY", keys_raw.get("openai_api_key", "")),
    )

    # Profile lookup
    lookup_raw = raw.get("lookup") or {}
    config.lookup = LookupConfig(
        endpoint=lookup_raw.get("endpoint", DEFAULT_LOOKUP_ENDPOINT),
        timeout=lookup_raw.get("timeout", 30),
        max_retries=lookup_raw.get("max_retries", 3),
    )

    # Pasted-text parser
    parser_raw = raw.get("parser") or {}
    config.parser = ParserConfig(
        model=parser_raw.get("model", "gpt-4o-mini"),
        max_tokens=parser_raw.get("max_tokens", 2048),
        temperature=parser_raw.get("temperature", 0.0),
    )

    # Web server
    web_raw = raw.get("web") or {}
    config.web = WebConfig(
        host=web_raw.get("host", "127.0.0.1"),
        port=web_raw.get("port", 8000),
    )

    config.log_dir = raw.get("log_dir", "logs")

    return config


def validate_config(config: AppConfig) -> list[str]:
    """Return list of validation warnings (empty = OK)."""
    warnings = []

    if not config.api_keys.proxycurl_api_key:
        warnings.append("No Proxycurl API key configured - LinkedIn URL lookup will be unavailable")

    if not config.api_keys.openai_api_key:
        warnings.append("No OpenAI API key configured - pasted profile parsing will be unavailable")

    if config.lookup.timeout <= 0:
        warnings.append("Lookup timeout must be positive")

    if not 1 <= config.web.port <= 65535:
        warnings.append(f"Invalid web port: {config.web.port}")

    return warnings
