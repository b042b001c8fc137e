"""Profile record data model."""

from dataclasses import dataclass, field
from typing import Any, Mapping


def _text(value: Any) -> str:
    if value is None:
        return ""
    return str(value).strip()


def _mappings(value: Any) -> list[Mapping]:
    if not isinstance(value, list):
        return []
    return [item for item in value if isinstance(item, Mapping)]


@dataclass
class ContactInfo:
    email: str = ""
    phone: str = ""
    website: str = ""
    linkedin: str = ""

    @property
    def is_empty(self) -> bool:
        return not (self.email or self.phone or self.website or self.linkedin)

    @property
    def linkedin_href(self) -> str:
        """Full profile URL; a bare handle is expanded."""
        if not self.linkedin:
            return ""
        if self.linkedin.startswith("http"):
            return self.linkedin
        return f"https://linkedin.com/in/{self.linkedin}"

    @classmethod
    def from_dict(cls, data: Mapping) -> "ContactInfo":
        return cls(
            email=_text(data.get("email")),
            phone=_text(data.get("phone")),
            website=_text(data.get("website")),
            linkedin=_text(data.get("linkedin")),
        )

    def to_dict(self) -> dict:
        return {k: v for k, v in {
            "email": self.email,
            "phone": self.phone,
            "website": self.website,
            "linkedin": self.linkedin,
        }.items() if v}


@dataclass
class RoleEntry:
    """One position in a work history. `duration` is display text, never parsed."""

    title: str
    company: str
    duration: str = ""
    location: str = ""
    description: str = ""

    @classmethod
    def from_dict(cls, data: Mapping) -> "RoleEntry":
        return cls(
            title=_text(data.get("title")),
            company=_text(data.get("company")),
            duration=_text(data.get("duration")),
            location=_text(data.get("location")),
            description=_text(data.get("description")),
        )

    def to_dict(self) -> dict:
        d = {"title": self.title, "company": self.company, "duration": self.duration}
        if self.location:
            d["location"] = self.location
        if self.description:
            d["description"] = self.description
        return d


@dataclass
class EducationEntry:
    degree: str
    school: str
    years: str = ""
    field: str = ""

    @classmethod
    def from_dict(cls, data: Mapping) -> "EducationEntry":
        return cls(
            degree=_text(data.get("degree")),
            school=_text(data.get("school")),
            years=_text(data.get("years")),
            field=_text(data.get("field")),
        )

    def to_dict(self) -> dict:
        d = {"degree": self.degree, "school": self.school, "years": self.years}
        if self.field:
            d["field"] = self.field
        return d


@dataclass
class CertificationEntry:
    name: str
    issuer: str = ""
    date: str = ""

    @classmethod
    def from_dict(cls, data: Mapping) -> "CertificationEntry":
        return cls(
            name=_text(data.get("name")),
            issuer=_text(data.get("issuer")),
            date=_text(data.get("date")),
        )

    def to_dict(self) -> dict:
        d = {"name": self.name}
        if self.issuer:
            d["issuer"] = self.issuer
        if self.date:
            d["date"] = self.date
        return d


@dataclass
class ProfileRecord:
    """A person's professional background, as produced by a profile source.

    List fields are always lists (possibly empty) so consumers never have to
    check for ``None``.
    """

    name: str = ""
    headline: str = ""
    location: str = ""
    about: str = ""
    photo_url: str = ""
    contact: ContactInfo = field(default_factory=ContactInfo)
    experience: list[RoleEntry] = field(default_factory=list)
    education: list[EducationEntry] = field(default_factory=list)
    skills: list[str] = field(default_factory=list)
    certifications: list[CertificationEntry] = field(default_factory=list)
    personal_info: str = ""

    @property
    def initials(self) -> str:
        return "".join(part[0] for part in self.name.split()[:2]).upper()

    @property
    def first_name(self) -> str:
        parts = self.name.split()
        return parts[0] if parts else ""

    def text_surface(self) -> str:
        """Lowercased text the trait rules are matched against."""
        parts = [self.about, self.headline]
        for role in self.experience:
            parts.append(role.title)
            parts.append(role.description)
        parts.append(self.personal_info)
        return " ".join(p for p in parts if p).lower()

    @classmethod
    def from_dict(cls, data: Mapping) -> "ProfileRecord":
        """Build a record from a loose JSON-shaped mapping.

        Accepts the camelCase keys used on the wire. Absent or null list
        fields become empty lists; malformed entries are skipped.
        """
        contact = data.get("contact")
        skills = []
        for skill in data.get("skills") or []:
            if isinstance(skill, Mapping):
                skill = skill.get("name")
            skill = _text(skill)
            if skill:
                skills.append(skill)

        return cls(
            name=_text(data.get("name")),
            headline=_text(data.get("headline")),
            location=_text(data.get("location")),
            about=_text(data.get("about")),
            photo_url=_text(data.get("photoUrl") or data.get("photo_url")),
            contact=ContactInfo.from_dict(contact) if isinstance(contact, Mapping) else ContactInfo(),
            experience=[RoleEntry.from_dict(e) for e in _mappings(data.get("experience"))],
            education=[EducationEntry.from_dict(e) for e in _mappings(data.get("education"))],
            skills=skills,
            certifications=[CertificationEntry.from_dict(c) for c in _mappings(data.get("certifications"))],
            personal_info=_text(data.get("personalInfo") or data.get("personal_info")),
        )

    def to_dict(self) -> dict:
        """Convert to the camelCase mapping used for JSON output."""
        d: dict = {"name": self.name, "headline": self.headline}
        if self.location:
            d["location"] = self.location
        if self.about:
            d["about"] = self.about
        if self.photo_url:
            d["photoUrl"] = self.photo_url
        if not self.contact.is_empty:
            d["contact"] = self.contact.to_dict()
        d["experience"] = [e.to_dict() for e in self.experience]
        d["education"] = [e.to_dict() for e in self.education]
        d["skills"] = list(self.skills)
        if self.certifications:
            d["certifications"] = [c.to_dict() for c in self.certifications]
        if self.personal_info:
            d["personalInfo"] = self.personal_info
        return d
