"""Exceptions raised by the profile source and parsing layers."""


class LinkedCVError(Exception):
    """Base class for all LinkedCV errors."""


class ProfileLookupError(LinkedCVError):
    """The profile-lookup service could not return a profile."""


class ProfileNotFoundError(ProfileLookupError):
    """The requested profile does not exist or is private."""


class ProfileParseError(LinkedCVError):
    """Pasted profile text could not be turned into a structured record."""


class ProfileTextTooShortError(LinkedCVError, ValueError):
    """Pasted profile text is too short to be worth parsing."""
