"""
Documents and parties as returned by the Scrive API.

Parsing happens at the boundary: anything that does not have the
expected shape raises MalformedResponseError instead of leaking a
half-formed dict to the host.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from docsign.exceptions import MalformedResponseError
from .parties import FieldType, SignatoryRole


def _require_object(data: Any, what: str, document_id: str = None) -> Dict[str, Any]:
    if not isinstance(data, dict):
        raise MalformedResponseError(
            f"Expected {what} to be a JSON object, got {type(data).__name__}",
            payload=data,
            document_id=document_id,
        )
    return data


def _require_list(data: Dict[str, Any], key: str, what: str, document_id: str = None) -> List[Any]:
    value = data.get(key)
    if not isinstance(value, list):
        raise MalformedResponseError(
            f"{what} is missing list '{key}'",
            payload=data,
            document_id=document_id,
        )
    return value


@dataclass(frozen=True)
class PartyField:
    """A field as echoed back by the service"""
    type: str
    value: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Any, document_id: str = None) -> 'PartyField':
        data = _require_object(data, 'party field', document_id)
        if 'type' not in data:
            raise MalformedResponseError("Party field has no 'type'", payload=data, document_id=document_id)
        return cls(type=data['type'], value=data.get('value'))


@dataclass(frozen=True)
class SigningParty:
    """
    A party attached to a remote document.

    `api_delivery_url` is only populated once the document is started; it
    is usually relative to the API base URL.
    """
    name: Optional[str]
    email: Optional[str]
    signatory_role: Optional[str]
    delivery_method: Optional[str] = None
    sign_success_redirect_url: Optional[str] = None
    api_delivery_url: Optional[str] = None
    fields: List[PartyField] = field(default_factory=list)
    raw: Dict[str, Any] = field(default_factory=dict, compare=False, repr=False)

    @property
    def is_signing_party(self) -> bool:
        return self.signatory_role == SignatoryRole.SIGNING_PARTY.value

    def get_field(self, field_type: str) -> Optional[PartyField]:
        """First field of the given type, if any"""
        return next((f for f in self.fields if f.type == field_type), None)

    @classmethod
    def from_dict(cls, data: Any, document_id: str = None) -> 'SigningParty':
        data = _require_object(data, 'party', document_id)
        fields = [
            PartyField.from_dict(f, document_id)
            for f in _require_list(data, 'fields', 'Party', document_id)
        ]

        # Scrive keeps name/email inside the fields; fall back to them
        by_type = {f.type: f.value for f in reversed(fields)}

        return cls(
            name=data.get('name', by_type.get(FieldType.COMPANY.value)),
            email=data.get('email', by_type.get(FieldType.EMAIL.value)),
            signatory_role=data.get('signatory_role'),
            delivery_method=data.get('delivery_method'),
            sign_success_redirect_url=data.get('sign_success_redirect_url'),
            api_delivery_url=data.get('api_delivery_url'),
            fields=fields,
            raw=data,
        )


@dataclass(frozen=True)
class Document:
    """A remote document with its parties"""
    id: str
    title: Optional[str]
    parties: List[SigningParty] = field(default_factory=list)
    raw: Dict[str, Any] = field(default_factory=dict, compare=False, repr=False)

    @property
    def signing_parties(self) -> List[SigningParty]:
        """Parties that sign, in document order (the viewer is excluded)"""
        return [p for p in self.parties if p.is_signing_party]

    def find_party(self, email: str) -> Optional[SigningParty]:
        """Signing party with the given email, or None"""
        return next((p for p in self.signing_parties if p.email == email), None)

    @classmethod
    def from_dict(cls, data: Any, document_id: str = None) -> 'Document':
        data = _require_object(data, 'document', document_id)
        doc_id = data.get('id')
        if not doc_id:
            raise MalformedResponseError("Document has no 'id'", payload=data, document_id=document_id)
        doc_id = str(doc_id)

        if 'title' not in data:
            raise MalformedResponseError("Document has no 'title'", payload=data, document_id=doc_id)

        parties = [
            SigningParty.from_dict(p, doc_id)
            for p in _require_list(data, 'parties', 'Document', doc_id)
        ]
        return cls(id=doc_id, title=data['title'], parties=parties, raw=data)
