"""Tests for data models."""

from linkedcv.analysis.models import AboutSegments, AchievementStat
from linkedcv.profile.models import ContactInfo, ProfileRecord, RoleEntry


class TestProfileRecord:
    def test_defaults_are_empty_lists(self):
        profile = ProfileRecord()
        assert profile.experience == []
        assert profile.education == []
        assert profile.skills == []
        assert profile.certifications == []

    def test_from_dict_camel_case(self):
        profile = ProfileRecord.from_dict({
            "name": "Ada Lovelace",
            "headline": "Analyst",
            "photoUrl": "https://example.com/ada.png",
            "personalInfo": "Poetry",
            "contact": {"email": "ada@example.com", "linkedin": "ada"},
            "experience": [{"title": "Analyst", "company": "Engine Co", "duration": "1842 – 1843"}],
            "education": [{"degree": "Private tuition", "school": "Home", "years": "1830"}],
            "skills": ["Mathematics", {"name": "Notes"}],
            "certifications": [{"name": "Translator", "issuer": "Taylor"}],
        })
        assert profile.photo_url == "https://example.com/ada.png"
        assert profile.personal_info == "Poetry"
        assert profile.contact.email == "ada@example.com"
        assert profile.experience[0].company == "Engine Co"
        assert profile.education[0].school == "Home"
        assert profile.skills == ["Mathematics", "Notes"]
        assert profile.certifications[0].issuer == "Taylor"

    def test_from_dict_null_lists(self):
        profile = ProfileRecord.from_dict({
            "name": "X",
            "experience": None,
            "education": None,
            "skills": None,
            "certifications": None,
            "contact": None,
        })
        assert profile.experience == []
        assert profile.education == []
        assert profile.skills == []
        assert profile.certifications == []
        assert profile.contact.is_empty

    def test_from_dict_skips_malformed_entries(self):
        profile = ProfileRecord.from_dict({
            "experience": ["not a role", {"title": "Dev", "company": "Co"}],
            "skills": ["", None, "Go"],
        })
        assert len(profile.experience) == 1
        assert profile.experience[0].description == ""
        assert profile.skills == ["Go"]

    def test_to_dict_omits_empty_optionals(self):
        d = ProfileRecord(name="A B", headline="H").to_dict()
        assert d == {
            "name": "A B",
            "headline": "H",
            "experience": [],
            "education": [],
            "skills": [],
        }

    def test_round_trip_keeps_wire_keys(self):
        data = {
            "name": "A B",
            "headline": "H",
            "about": "About",
            "photoUrl": "p.png",
            "contact": {"email": "a@b.c"},
            "experience": [{"title": "T", "company": "C", "duration": "D", "description": "Desc"}],
            "education": [],
            "skills": ["S"],
            "personalInfo": "Hiking",
        }
        assert ProfileRecord.from_dict(data).to_dict() == data

    def test_initials(self):
        assert ProfileRecord(name="grace brewster hopper").initials == "GB"
        assert ProfileRecord(name="Cher").initials == "C"
        assert ProfileRecord(name="").initials == ""

    def test_first_name(self):
        assert ProfileRecord(name="Grace Hopper").first_name == "Grace"
        assert ProfileRecord().first_name == ""

    def test_text_surface(self):
        profile = ProfileRecord(
            headline="CTO",
            about="I Build",
            experience=[RoleEntry(title="Lead", company="Co", description="Did Things")],
        )
        assert profile.text_surface() == "i build cto lead did things"


class TestContactInfo:
    def test_linkedin_href_expands_handle(self):
        assert ContactInfo(linkedin="ada").linkedin_href == "https://linkedin.com/in/ada"

    def test_linkedin_href_keeps_url(self):
        url = "https://www.linkedin.com/in/ada"
        assert ContactInfo(linkedin=url).linkedin_href == url

    def test_empty(self):
        assert ContactInfo().is_empty
        assert not ContactInfo(phone="123").is_empty


class TestAnalysisModels:
    def test_segments_to_dict(self):
        seg = AboutSegments(intro="i", highlights=["a"], closing="c")
        assert seg.to_dict() == {"intro": "i", "highlights": ["a"], "closing": "c"}

    def test_stat_to_dict(self):
        assert AchievementStat("35%", "Revenue Growth").to_dict() == {
            "value": "35%",
            "label": "Revenue Growth",
        }
