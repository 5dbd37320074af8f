"""
member.py - tree_intelligence member modeling.

This module provides the Member record and Gender enum used by the relation
inference, link suggestion and statistics components. It supports:
    - Building members from host records (camelCase or snake_case keys)
    - Normalizing gender values
    - Display names and surname normalization

Module: tree_intelligence.member
"""
from __future__ import annotations

__all__ = ['Gender', 'Member']

import logging
from dataclasses import dataclass
from datetime import date as _date
from enum import Enum
from typing import Any, Dict, Optional, Union

from .date_utils import parse_date

logger = logging.getLogger(__name__)


class Gender(Enum):
    """Recorded gender of a member. UNKNOWN covers unspecified values."""
    MALE = "MALE"
    FEMALE = "FEMALE"
    OTHER = "OTHER"
    UNKNOWN = "UNKNOWN"

    @classmethod
    def parse(cls, value: Any) -> Gender:
        """
        Map a host gender value to a Gender.

        Args:
            value: Gender enum, string such as 'MALE', 'female', 'M', 'F', or None

        Returns:
            Gender, UNKNOWN when the value is missing or unrecognised
        """
        if isinstance(value, Gender):
            return value
        if not value or not isinstance(value, str):
            return cls.UNKNOWN
        text = value.strip().upper()
        if text in ('MALE', 'M'):
            return cls.MALE
        if text in ('FEMALE', 'F'):
            return cls.FEMALE
        if text == 'OTHER':
            return cls.OTHER
        return cls.UNKNOWN


@dataclass(frozen=True)
class Member:
    """
    Represents a member of the family tree.

    Attributes:
        id (str): Stable member identifier.
        first_name (Optional[str]): First name.
        last_name (Optional[str]): Last name.
        email (str): Email address (placeholder for virtual members).
        gender (Gender): Recorded gender.
        is_virtual (bool): Placeholder ancestor with no login.
        avatar_url (Optional[str]): Avatar image URL.
        birth_date (Optional[date]): Birth date.
        role (str): Role in the association (not used by the engine).
        status (str): Membership status (not used by the engine).
        family_branch (Optional[str]): Free-text branch label.
    """
    id: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: str = ""
    gender: Gender = Gender.UNKNOWN
    is_virtual: bool = False
    avatar_url: Optional[str] = None
    birth_date: Optional[_date] = None
    role: str = ""
    status: str = ""
    family_branch: Optional[str] = None

    @property
    def display_name(self) -> str:
        """First and last name, falling back to email, then id."""
        name = " ".join(part for part in (self.first_name, self.last_name) if part)
        return name or self.email or self.id

    @property
    def normalized_last_name(self) -> str:
        """Lower-cased, trimmed last name; empty string if none."""
        return (self.last_name or "").strip().lower()

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> Member:
        """
        Create a member from a host record.

        Both the host's camelCase keys (firstName, isVirtual, ...) and
        snake_case keys are accepted.

        Args:
            data: Member record

        Returns:
            Member instance

        Raises:
            ValueError: If the record has no id
        """
        member_id = data.get('id')
        if member_id is None or member_id == "":
            raise ValueError(f"Member record without id: {data!r}")

        def _get(*keys: str, default: Any = None) -> Any:
            for key in keys:
                if key in data:
                    return data[key]
            return default

        return cls(
            id=str(member_id),
            first_name=_get('firstName', 'first_name'),
            last_name=_get('lastName', 'last_name'),
            email=_get('email', default="") or "",
            gender=Gender.parse(_get('gender')),
            is_virtual=bool(_get('isVirtual', 'is_virtual', default=False)),
            avatar_url=_get('avatar_url', 'avatarUrl'),
            birth_date=parse_date(_get('birth_date', 'birthDate')),
            role=_get('role', default="") or "",
            status=_get('status', default="") or "",
            family_branch=_get('family_branch', 'familyBranch'),
        )

    @classmethod
    def coerce(cls, value: Union[Member, Dict[str, Any]]) -> Member:
        """Return a Member unchanged or build one from a host record."""
        if isinstance(value, Member):
            return value
        return cls.from_dict(value)

    def __str__(self) -> str:
        return f"{self.display_name} ({self.id})"
