"""Contact operations."""

from __future__ import annotations

from collections.abc import Iterator

from ..http import Timeout
from ..models import (
    Contact,
    CreateContactRequest,
    DeleteContactRequest,
    GetContactRequest,
    GetContactResponse,
    GetContactsRequest,
    GetContactsResponse,
    UpdateContactCustomFieldsRequest,
    UpdateContactCustomFieldsResponse,
    UpdateContactRequest,
    UpdateContactResponse,
    load_contacts,
)
from .base import ResourceBase, path_segment

CONTACTS_PATH = "/v3/contacts"


class ContactsResource(ResourceBase):
    """Interact with GetResponse contacts.

    See https://apidocs.getresponse.com/v3/resources/contacts for field semantics.
    """

    def create(self, request: CreateContactRequest, *, timeout: Timeout | None = None) -> None:
        self._post(CONTACTS_PATH, request.to_payload(), expect_json=False, timeout=timeout)

    def list(
        self, request: GetContactsRequest, *, timeout: Timeout | None = None
    ) -> GetContactsResponse:
        response = self._get(CONTACTS_PATH, params=request.to_params(), timeout=timeout)
        return GetContactsResponse(contacts=self._decode(response, load_contacts))

    def iter_all(
        self, request: GetContactsRequest, *, timeout: Timeout | None = None
    ) -> Iterator[Contact]:
        """Yield contacts page by page until a short page is returned.

        Paging starts at ``request.page`` (or 1) and requires a positive
        ``request.per_page``.
        """
        if request.per_page <= 0:
            raise ValueError("per_page must be positive to page through contacts")
        page = max(request.page, 1)
        while True:
            current = GetContactsRequest(
                query=request.query,
                sort=request.sort,
                fields=request.fields,
                page=page,
                per_page=request.per_page,
                additional_flags=request.additional_flags,
            )
            contacts = self.list(current, timeout=timeout).contacts
            yield from contacts
            if len(contacts) < request.per_page:
                return
            page += 1

    def get(
        self, request: GetContactRequest, *, timeout: Timeout | None = None
    ) -> GetContactResponse:
        response = self._get(
            self._contact_path(request.id), params=request.to_params(), timeout=timeout
        )
        return GetContactResponse(contact=self._decode(response, Contact.from_payload))

    def update(
        self, request: UpdateContactRequest, *, timeout: Timeout | None = None
    ) -> UpdateContactResponse:
        response = self._post(
            self._contact_path(request.id), request.new_data.to_payload(), timeout=timeout
        )
        return UpdateContactResponse(contact=self._decode(response, Contact.from_payload))

    def upsert_custom_fields(
        self, request: UpdateContactCustomFieldsRequest, *, timeout: Timeout | None = None
    ) -> UpdateContactCustomFieldsResponse:
        response = self._post(
            f"{self._contact_path(request.id)}/custom-fields",
            request.to_payload(),
            timeout=timeout,
        )
        return UpdateContactCustomFieldsResponse(
            contact=self._decode(response, Contact.from_payload)
        )

    def delete(self, request: DeleteContactRequest, *, timeout: Timeout | None = None) -> None:
        self._delete(self._contact_path(request.id), params=request.to_params(), timeout=timeout)

    @staticmethod
    def _contact_path(contact_id: str) -> str:
        return f"{CONTACTS_PATH}/{path_segment(contact_id)}"
