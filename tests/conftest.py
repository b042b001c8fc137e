"""Shared fixtures."""

import pytest

from linkedcv.profile.models import (
    CertificationEntry,
    ContactInfo,
    EducationEntry,
    ProfileRecord,
    RoleEntry,
)


@pytest.fixture
def sample_profile():
    return ProfileRecord(
        name="Jane Doe",
        headline="Head of Growth at Acme",
        location="London, United Kingdom",
        about=(
            "Growth leader for B2B software.\n"
            "• Scaled ARR from £1m to £10m\n"
            "• Built a team of 15 marketers\n"
            "• Launched in 6 markets"
        ),
        contact=ContactInfo(email="jane@acme.test", linkedin="janedoe"),
        experience=[
            RoleEntry(
                title="Head of Growth",
                company="Acme",
                duration="Mar 2021 – Present",
                location="London",
                description="Grew revenue by 35% and led a team of 12 people.",
            ),
            RoleEntry(title="Marketer", company="Beta", duration="2018 – 2021"),
        ],
        education=[EducationEntry(degree="BSc", field="Economics", school="LSE", years="2014 – 2017")],
        skills=["SEO", "Analytics", "Copywriting"],
        certifications=[CertificationEntry(name="Google Ads", issuer="Google", date="2020")],
    )
