"""Resolve a profile from either source using the app configuration."""

from linkedcv.config import AppConfig
from linkedcv.profile.ai_parser import parse_profile_text
from linkedcv.profile.linkedin_lookup import fetch_linkedin_profile
from linkedcv.profile.models import ProfileRecord
from linkedcv.utils.http_client import create_session


def lookup_profile(config: AppConfig, linkedin_url: str) -> ProfileRecord:
    with create_session(max_retries=config.lookup.max_retries) as session:
        return fetch_linkedin_profile(
            linkedin_url,
            api_key=config.api_keys.proxycurl_api_key,
            session=session,
            endpoint=config.lookup.endpoint,
            timeout=config.lookup.timeout,
        )


def parse_pasted_profile(config: AppConfig, text: str) -> ProfileRecord:
    return parse_profile_text(
        text,
        api_key=config.api_keys.openai_api_key,
        model=config.parser.model,
        max_tokens=config.parser.max_tokens,
        temperature=config.parser.temperature,
    )
