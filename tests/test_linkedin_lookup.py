"""Tests for the LinkedIn profile lookup."""

import pytest
import requests

from linkedcv.errors import ProfileLookupError, ProfileNotFoundError
from linkedcv.profile.linkedin_lookup import (
    fetch_linkedin_profile,
    format_date_range,
    map_lookup_response,
    normalize_linkedin_url,
)

URL = "https://www.linkedin.com/in/janedoe"

PAYLOAD = {
    "first_name": "Jane",
    "last_name": "Doe",
    "headline": None,
    "occupation": "Head of Growth at Acme",
    "city": "London",
    "state": None,
    "country_full_name": "United Kingdom",
    "summary": "Growth leader.\n\nLet's talk.",
    "personal_emails": [],
    "work_email": "jane@acme.test",
    "personal_websites": [{"url": "https://jane.test"}],
    "experiences": [
        {
            "title": "Head of Growth",
            "company": "Acme",
            "starts_at": {"year": 2021, "month": 3},
            "ends_at": None,
            "location": "London",
            "description": "Grew revenue by 35%.",
        },
        {
            "title": "Marketer",
            "company": "Beta",
            "starts_at": {"year": 2018},
            "ends_at": {"year": 2021, "month": 2},
        },
    ],
    "education": [
        {"degree_name": None, "field_of_study": "Economics", "school": "LSE",
         "starts_at": {"year": 2014}, "ends_at": {"year": 2017}},
    ],
    "skills": ["SEO", {"name": "Analytics"}, None],
    "certifications": [
        {"name": "Google Ads", "authority": "Google", "starts_at": {"year": 2020}},
        {"name": "Scrum", "authority": None, "starts_at": None},
    ],
}


class FakeResponse:
    def __init__(self, status_code=200, payload=None, json_error=False):
        self.status_code = status_code
        self._payload = payload
        self._json_error = json_error

    @property
    def ok(self):
        return 200 <= self.status_code < 400

    def json(self):
        if self._json_error:
            raise ValueError("no json")
        return self._payload


class FakeSession:
    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.calls = []

    def get(self, url, **kwargs):
        self.calls.append((url, kwargs))
        if self.error:
            raise self.error
        return self.response


class ClosingSession(FakeSession):
    closed = False

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.closed = True


class TestNormalizeUrl:
    def test_full_url_unchanged(self):
        assert normalize_linkedin_url(f"  {URL}  ") == URL

    def test_username_expanded(self):
        assert normalize_linkedin_url("janedoe") == URL
        assert normalize_linkedin_url("/janedoe") == URL

    def test_other_site_rejected(self):
        with pytest.raises(ValueError, match="valid LinkedIn"):
            normalize_linkedin_url("https://example.com/in/janedoe")

    def test_empty_rejected(self):
        with pytest.raises(ValueError):
            normalize_linkedin_url("   ")


class TestFormatDateRange:
    def test_month_and_year(self):
        assert format_date_range({"year": 2020, "month": 1}, {"year": 2022, "month": 12}) == "Jan 2020 – Dec 2022"

    def test_open_ended(self):
        assert format_date_range({"year": 2021, "month": 3}, None) == "Mar 2021 – Present"

    def test_year_only(self):
        assert format_date_range({"year": 2014}, {"year": 2017}) == "2014 – 2017"

    def test_month_out_of_range_falls_back_to_year(self):
        assert format_date_range({"year": 2020, "month": 13}, {"year": 2021, "month": 0}) == "2020 – 2021"

    def test_non_numeric_month_falls_back_to_year(self):
        assert format_date_range({"year": 2020, "month": "spring"}, None) == "2020 – Present"

    def test_numeric_string_month(self):
        assert format_date_range({"year": 2020, "month": "4"}, None) == "Apr 2020 – Present"

    def test_no_start(self):
        assert format_date_range(None, {"year": 2017}) == ""


class TestMapLookupResponse:
    def test_maps_core_fields(self):
        profile = map_lookup_response(PAYLOAD, URL)
        assert profile.name == "Jane Doe"
        assert profile.headline == "Head of Growth at Acme"
        assert profile.location == "London, United Kingdom"
        assert profile.about.startswith("Growth leader.")

    def test_maps_contact(self):
        contact = map_lookup_response(PAYLOAD, URL).contact
        assert contact.email == "jane@acme.test"
        assert contact.website == "https://jane.test"
        assert contact.linkedin == URL

    def test_maps_experience(self):
        roles = map_lookup_response(PAYLOAD, URL).experience
        assert roles[0].duration == "Mar 2021 – Present"
        assert roles[0].description == "Grew revenue by 35%."
        assert roles[1].duration == "2018 – Feb 2021"
        assert roles[1].description == ""

    def test_maps_education_and_skills(self):
        profile = map_lookup_response(PAYLOAD, URL)
        assert profile.education[0].degree == "Degree"
        assert profile.education[0].field == "Economics"
        assert profile.skills == ["SEO", "Analytics"]

    def test_maps_certifications(self):
        certs = map_lookup_response(PAYLOAD, URL).certifications
        assert certs[0].issuer == "Google"
        assert certs[0].date == "2020"
        assert certs[1].date == ""

    def test_empty_payload(self):
        profile = map_lookup_response({}, URL)
        assert profile.name == "Unknown"
        assert profile.experience == []
        assert profile.skills == []


class TestFetchLinkedinProfile:
    def test_success(self):
        session = FakeSession(FakeResponse(200, PAYLOAD))
        profile = fetch_linkedin_profile("janedoe", api_key="key", session=session)
        assert profile.name == "Jane Doe"

        _, kwargs = session.calls[0]
        assert kwargs["params"] == {"url": URL, "skills": "include", "extra": "include"}
        assert kwargs["headers"]["Authorization"] == "Bearer key"

    def test_missing_key(self):
        with pytest.raises(ProfileLookupError, match="not configured"):
            fetch_linkedin_profile(URL, api_key="", session=FakeSession())

    def test_invalid_url_raises_value_error(self):
        with pytest.raises(ValueError):
            fetch_linkedin_profile("https://example.com", api_key="key", session=FakeSession())

    def test_not_found(self):
        session = FakeSession(FakeResponse(404, {}))
        with pytest.raises(ProfileNotFoundError, match="private"):
            fetch_linkedin_profile(URL, api_key="key", session=session)

    def test_unauthorized(self):
        session = FakeSession(FakeResponse(401, {}))
        with pytest.raises(ProfileLookupError, match="Invalid Proxycurl API key"):
            fetch_linkedin_profile(URL, api_key="key", session=session)

    def test_other_error_uses_detail(self):
        session = FakeSession(FakeResponse(503, {"detail": "Service busy"}))
        with pytest.raises(ProfileLookupError, match="Service busy"):
            fetch_linkedin_profile(URL, api_key="key", session=session)

    def test_other_error_without_body(self):
        session = FakeSession(FakeResponse(500, json_error=True))
        with pytest.raises(ProfileLookupError, match="Failed to fetch"):
            fetch_linkedin_profile(URL, api_key="key", session=session)

    def test_network_error_wrapped(self):
        session = FakeSession(error=requests.ConnectionError("boom"))
        with pytest.raises(ProfileLookupError, match="boom"):
            fetch_linkedin_profile(URL, api_key="key", session=session)

    def test_own_session_is_closed(self, monkeypatch):
        session = ClosingSession(FakeResponse(200, PAYLOAD))
        monkeypatch.setattr("linkedcv.profile.linkedin_lookup.create_session", lambda: session)
        assert fetch_linkedin_profile(URL, api_key="key").name == "Jane Doe"
        assert session.closed

    def test_bad_month_in_payload_still_maps(self):
        payload = dict(PAYLOAD, experiences=[{"title": "T", "company": "C", "starts_at": {"year": 2020, "month": 99}}])
        session = FakeSession(FakeResponse(200, payload))
        profile = fetch_linkedin_profile(URL, api_key="key", session=session)
        assert profile.experience[0].duration == "2020 – Present"
