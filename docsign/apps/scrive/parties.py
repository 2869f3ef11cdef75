"""
Party payload builder.

Maps host-supplied signatories to the party/field representation the
Scrive update endpoint expects. A fixed non-signing viewer party is
always placed first.
"""

import json
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterable, List, Mapping, Optional, Union

logger = logging.getLogger(__name__)

DELIVERY_METHOD = 'api'
VIEWER_COMPANY = 'Default Party'


class FieldType(Enum):
    """Field types attached to parties"""
    COMPANY = 'company'
    EMAIL = 'email'


class SignatoryRole(Enum):
    """Party roles"""
    VIEWER = 'viewer'
    SIGNING_PARTY = 'signing_party'


@dataclass(frozen=True)
class PartyInput:
    """A signatory as supplied by the host application"""
    name: str
    email: str

    @classmethod
    def coerce(cls, value: Union['PartyInput', Mapping[str, Any], Any]) -> 'PartyInput':
        """Accept a PartyInput, a mapping or any object with name/email attributes."""
        if isinstance(value, cls):
            return value
        if isinstance(value, Mapping):
            return cls(name=value.get('name'), email=value.get('email'))
        return cls(name=getattr(value, 'name', None), email=getattr(value, 'email', None))


@dataclass(frozen=True)
class Field:
    """One labeled datum a party presents"""
    type: FieldType
    value: str
    order: int
    is_obligatory: bool = True

    def to_dict(self) -> Dict[str, Any]:
        return {
            'type': self.type.value,
            'value': self.value,
            'order': self.order,
            'is_obligatory': self.is_obligatory,
        }


@dataclass(frozen=True)
class PartySpec:
    """Outbound party definition"""
    is_signatory: bool
    signatory_role: SignatoryRole
    sign_success_redirect_url: str
    fields: List[Field] = field(default_factory=list)
    delivery_method: str = DELIVERY_METHOD

    def to_dict(self) -> Dict[str, Any]:
        return {
            'is_signatory': self.is_signatory,
            'signatory_role': self.signatory_role.value,
            'delivery_method': self.delivery_method,
            'sign_success_redirect_url': self.sign_success_redirect_url,
            'fields': [f.to_dict() for f in self.fields],
        }


@dataclass(frozen=True)
class DocumentSpec:
    """Outbound document definition sent by the update step"""
    title: str
    parties: List[PartySpec] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'title': self.title,
            'parties': [p.to_dict() for p in self.parties],
        }

    def to_json(self) -> str:
        return json.dumps(self.to_dict())


def build_viewer_party(redirect_url: str) -> PartySpec:
    """The fixed non-signing party that leads every party list"""
    return PartySpec(
        is_signatory=False,
        signatory_role=SignatoryRole.VIEWER,
        sign_success_redirect_url=redirect_url,
        fields=[
            Field(type=FieldType.COMPANY, value=VIEWER_COMPANY, order=1),
        ],
    )


def build_signing_party(party: PartyInput, redirect_url: str) -> PartySpec:
    """A signing party carrying company (the name) then email."""
    return PartySpec(
        is_signatory=True,
        signatory_role=SignatoryRole.SIGNING_PARTY,
        sign_success_redirect_url=redirect_url,
        fields=[
            Field(type=FieldType.COMPANY, value=party.name, order=1),
            Field(type=FieldType.EMAIL, value=party.email, order=2),
        ],
    )


def build_parties(
    parties: Iterable[Union[PartyInput, Mapping[str, Any]]],
    redirect_url: Optional[str],
) -> List[PartySpec]:
    """
    Build the outbound party list.

    Args:
        parties: Signatories in the order they should appear
        redirect_url: URL the signatory is sent to after signing

    Returns:
        [viewer, *signing parties], signing parties in input order.
        Names and emails are passed through unvalidated.
    """
    result = [build_viewer_party(redirect_url)]
    for party in parties:
        result.append(build_signing_party(PartyInput.coerce(party), redirect_url))

    logger.debug(f"Built {len(result)} party spec(s) ({len(result) - 1} signing)")
    return result


def build_document_spec(
    title: str,
    parties: Iterable[Union[PartyInput, Mapping[str, Any]]],
    redirect_url: Optional[str],
) -> DocumentSpec:
    """Wrap the party list with the document title."""
    return DocumentSpec(title=title, parties=build_parties(parties, redirect_url))
