"""Typed request/response shapes for the contacts API.

The client does not validate contact contents. These classes only map the
API's camelCase JSON to attributes and back. ``None`` means "omitted": it is
dropped on encode, and absent keys decode to ``None``. Unknown keys in a
response are ignored.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any


def _compact(payload: dict[str, Any]) -> dict[str, Any]:
    return {key: value for key, value in payload.items() if value is not None}


def _require_mapping(payload: Any, shape: str) -> Mapping[str, Any]:
    if not isinstance(payload, Mapping):
        raise TypeError(f"{shape} must be a JSON object, got {type(payload).__name__}")
    return payload


@dataclass(slots=True)
class CustomFieldValue:
    custom_field_id: str
    value: list[str] = field(default_factory=list)

    def to_payload(self) -> dict[str, Any]:
        return {"customFieldId": self.custom_field_id, "value": list(self.value)}

    @classmethod
    def from_payload(cls, payload: Any) -> CustomFieldValue:
        data = _require_mapping(payload, "customFieldValue")
        value = data.get("value")
        if value is None:
            value = []
        elif not isinstance(value, list):
            raise TypeError(
                f"customFieldValue.value must be a JSON array, got {type(value).__name__}"
            )
        return cls(custom_field_id=data.get("customFieldId"), value=list(value))


@dataclass(slots=True)
class Campaign:
    campaign_id: str
    name: str | None = None
    href: str | None = None

    def to_payload(self) -> dict[str, Any]:
        return _compact({"campaignId": self.campaign_id, "name": self.name, "href": self.href})

    @classmethod
    def from_payload(cls, payload: Any) -> Campaign:
        data = _require_mapping(payload, "campaign")
        return cls(campaign_id=data.get("campaignId"), name=data.get("name"), href=data.get("href"))


@dataclass(slots=True)
class Tag:
    tag_id: str
    name: str | None = None

    def to_payload(self) -> dict[str, Any]:
        return _compact({"tagId": self.tag_id, "name": self.name})

    @classmethod
    def from_payload(cls, payload: Any) -> Tag:
        data = _require_mapping(payload, "tag")
        return cls(tag_id=data.get("tagId"), name=data.get("name"))


@dataclass(slots=True)
class Contact:
    """A contact as returned by (or sent to) ``/v3/contacts``."""

    contact_id: str | None = None
    href: str | None = None
    name: str | None = None
    email: str | None = None
    note: str | None = None
    origin: str | None = None
    time_zone: str | None = None
    activities: str | None = None
    day_of_cycle: int | str | None = None
    scoring: float | None = None
    engagement_score: float | None = None
    ip_address: str | None = None
    created_on: str | None = None
    changed_on: str | None = None
    campaign: Campaign | None = None
    custom_field_values: list[CustomFieldValue] | None = None
    tags: list[Tag] | None = None

    def to_payload(self) -> dict[str, Any]:
        return _compact(
            {
                "contactId": self.contact_id,
                "href": self.href,
                "name": self.name,
                "email": self.email,
                "note": self.note,
                "origin": self.origin,
                "timeZone": self.time_zone,
                "activities": self.activities,
                "dayOfCycle": self.day_of_cycle,
                "scoring": self.scoring,
                "engagementScore": self.engagement_score,
                "ipAddress": self.ip_address,
                "createdOn": self.created_on,
                "changedOn": self.changed_on,
                "campaign": self.campaign.to_payload() if self.campaign else None,
                "customFieldValues": _dump_list(self.custom_field_values),
                "tags": _dump_list(self.tags),
            }
        )

    @classmethod
    def from_payload(cls, payload: Any) -> Contact:
        data = _require_mapping(payload, "contact")
        campaign = data.get("campaign")
        return cls(
            contact_id=data.get("contactId"),
            href=data.get("href"),
            name=data.get("name"),
            email=data.get("email"),
            note=data.get("note"),
            origin=data.get("origin"),
            time_zone=data.get("timeZone"),
            activities=data.get("activities"),
            day_of_cycle=data.get("dayOfCycle"),
            scoring=data.get("scoring"),
            engagement_score=data.get("engagementScore"),
            ip_address=data.get("ipAddress"),
            created_on=data.get("createdOn"),
            changed_on=data.get("changedOn"),
            campaign=Campaign.from_payload(campaign) if campaign is not None else None,
            custom_field_values=_load_list(data.get("customFieldValues"), CustomFieldValue),
            tags=_load_list(data.get("tags"), Tag),
        )


def _dump_list(items: list[Any] | None) -> list[dict[str, Any]] | None:
    if items is None:
        return None
    return [item.to_payload() for item in items]


def _load_list(payload: Any, model: Any) -> list[Any] | None:
    if payload is None:
        return None
    if not isinstance(payload, list):
        raise TypeError(f"expected a JSON array, got {type(payload).__name__}")
    return [model.from_payload(item) for item in payload]


def load_contacts(payload: Any) -> list[Contact]:
    """Decode a list response, keeping the order the API returned."""

    if not isinstance(payload, list):
        raise TypeError(f"contacts must be a JSON array, got {type(payload).__name__}")
    return [Contact.from_payload(item) for item in payload]


# Exchanges -------------------------------------------------------------------


@dataclass(slots=True)
class CreateContactRequest:
    email: str
    campaign: Campaign
    name: str | None = None
    day_of_cycle: int | None = None
    custom_field_values: list[CustomFieldValue] | None = None
    ip_address: str | None = None
    tags: list[Tag] | None = None

    def to_payload(self) -> dict[str, Any]:
        return _compact(
            {
                "name": self.name,
                "email": self.email,
                "dayOfCycle": self.day_of_cycle,
                "campaign": {"campaignId": self.campaign.campaign_id},
                "customFieldValues": _dump_list(self.custom_field_values) or None,
                "ipAddress": self.ip_address,
                "tags": _dump_list(self.tags) or None,
            }
        )


@dataclass(slots=True)
class GetContactsRequest:
    query: Mapping[str, str] = field(default_factory=dict)
    sort: Mapping[str, str] = field(default_factory=dict)
    fields: list[str] = field(default_factory=list)
    page: int = 0
    per_page: int = 0
    additional_flags: str | None = None

    def to_params(self) -> dict[str, str]:
        params: dict[str, str] = {}
        for key, value in self.query.items():
            params[f"query[{key}]"] = value
        for key, value in self.sort.items():
            params[f"sort[{key}]"] = value
        if self.fields:
            params["fields"] = ",".join(self.fields)
        params["page"] = str(self.page)
        params["perPage"] = str(self.per_page)
        if self.additional_flags is not None:
            params["additionalFlags"] = self.additional_flags
        return params


@dataclass(slots=True)
class GetContactsResponse:
    contacts: list[Contact] = field(default_factory=list)


@dataclass(slots=True)
class GetContactRequest:
    id: str
    fields: list[str] = field(default_factory=list)

    def to_params(self) -> dict[str, str]:
        if not self.fields:
            return {}
        return {"fields": ",".join(self.fields)}


@dataclass(slots=True)
class GetContactResponse:
    contact: Contact


@dataclass(slots=True)
class UpdateContactRequest:
    id: str
    new_data: Contact


@dataclass(slots=True)
class UpdateContactResponse:
    contact: Contact


@dataclass(slots=True)
class UpdateContactCustomFieldsRequest:
    id: str
    custom_field_values: list[CustomFieldValue] = field(default_factory=list)

    def to_payload(self) -> dict[str, Any]:
        return {"customFieldValues": [item.to_payload() for item in self.custom_field_values]}


@dataclass(slots=True)
class UpdateContactCustomFieldsResponse:
    contact: Contact


@dataclass(slots=True)
class DeleteContactRequest:
    id: str
    message_id: str = ""
    ip_address: str = ""

    def to_params(self) -> dict[str, str]:
        return {"messageId": self.message_id, "ipAddress": self.ip_address}
