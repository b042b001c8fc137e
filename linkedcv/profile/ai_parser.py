"""Parse pasted profile text into a ProfileRecord with an OpenAI model."""

import json
import logging

from linkedcv.errors import ProfileParseError, ProfileTextTooShortError
from linkedcv.profile.models import ProfileRecord
from linkedcv.utils.text_processing import clean_pasted_text

logger = logging.getLogger("linkedcv.profile.ai")

MIN_TEXT_LENGTH = 50
MAX_TEXT_LENGTH = 12000

SYSTEM_PROMPT = """You are a CV parser. Extract structured information from a pasted LinkedIn profile text and return it as valid JSON only - no markdown, no explanation, just the JSON object.

Return this exact structure (omit optional fields if not found):
{
  "name": "Full Name",
  "headline": "Job Title / Professional Headline",
  "location": "City, Country",
  "about": "Summary/About text",
  "contact": {
    "email": "optional",
    "phone": "optional",
    "website": "optional",
    "linkedin": "optional linkedin URL or username"
  },
  "experience": [
    {
      "title": "Job Title",
      "company": "Company Name",
      "duration": "Jan 2020 - Present",
      "location": "optional",
      "description": "optional role description"
    }
  ],
  "education": [
    {
      "degree": "Degree name",
      "field": "optional field of study",
      "school": "University/School Name",
      "years": "2015 - 2019"
    }
  ],
  "skills": ["Skill 1", "Skill 2"],
  "certifications": [
    {
      "name": "Certification name",
      "issuer": "optional issuer",
      "date": "optional date"
    }
  ],
  "personalInfo": "optional interests, hobbies or volunteering"
}"""


def _strip_code_fence(content: str) -> str:
    content = content.strip()
    if content.startswith("```"):
        content = content.split("\n", 1)[1] if "\n" in content else ""
        content = content.rsplit("```", 1)[0].strip()
    return content


def parse_profile_text(
    text: str,
    api_key: str,
    model: str = "gpt-4o-mini",
    max_tokens: int = 2048,
    temperature: float = 0.0,
    client=None,
) -> ProfileRecord:
    """Extract a ProfileRecord from pasted text.

    Raises ProfileTextTooShortError for near-empty input and ProfileParseError
    when the model reply is not a JSON object. API errors propagate.
    """
    text = clean_pasted_text(text)
    if len(text) < MIN_TEXT_LENGTH:
        raise ProfileTextTooShortError("Please paste more LinkedIn profile text.")

    if client is None:
        from openai import OpenAI

        if not api_key:
            raise ProfileParseError("OpenAI API key not configured on server.")
        client = OpenAI(api_key=api_key)

    response = client.chat.completions.create(
        model=model,
        messages=[
            {"role": "system", "content": SYSTEM_PROMPT},
            {"role": "user", "content": f"Parse this LinkedIn profile:\n\n{text[:MAX_TEXT_LENGTH]}"},
        ],
        temperature=temperature,
        max_tokens=max_tokens,
    )

    content = _strip_code_fence(response.choices[0].message.content or "")

    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        logger.warning("Failed to parse model response as JSON: %s", e)
        raise ProfileParseError(
            "Could not parse the profile - try copying more of your LinkedIn page."
        ) from e

    if not isinstance(data, dict):
        raise ProfileParseError(
            "Could not parse the profile - try copying more of your LinkedIn page."
        )

    profile = ProfileRecord.from_dict(data)
    logger.info(
        "Parsed pasted profile: %s (%d roles, %d skills)",
        profile.name or "Unknown",
        len(profile.experience),
        len(profile.skills),
    )
    return profile
