"""Schema describing important fields for CLI table rendering."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

Row = Mapping[str, Any]
ValueExtractor = Callable[[Row], Any]
ValueFormatter = Callable[[Any], str]


@dataclass(frozen=True)
class Column:
    """Describe how to pull and format a column for Rich tables."""

    header: str
    keys: tuple[str, ...] = ()
    extractor: ValueExtractor | None = None
    formatter: ValueFormatter | None = None
    justify: str = "left"

    def render(self, row: Row) -> str:
        value: Any | None = None
        for key in self.keys:
            value = row.get(key)
            if value is not None:
                break
        if value is None and self.extractor:
            value = self.extractor(row)
        if value is None:
            return ""
        if self.formatter:
            formatted = self.formatter(value)
            return "" if formatted is None else str(formatted)
        return str(value)


@dataclass(frozen=True)
class TableView:
    """Describe a Rich table for a CLI command.

    Rows are rendered in the order given; list endpoints already return them
    in the order requested through ``sort[...]``.
    """

    title: str
    columns: tuple[Column, ...]


def _campaign_name(row: Row) -> Any:
    campaign = row.get("campaign")
    if isinstance(campaign, Mapping):
        return campaign.get("name") or campaign.get("campaignId")
    return None


def _count_formatter(value: Any) -> str:
    if isinstance(value, (list, tuple)):
        return str(len(value))
    return ""


CLI_TABLE_VIEWS: dict[str, TableView] = {
    "contacts.list": TableView(
        title="Contacts",
        columns=(
            Column("Contact ID", keys=("contactId",)),
            Column("Name", keys=("name",)),
            Column("Email", keys=("email",)),
            Column("Campaign", extractor=_campaign_name),
            Column("Day", keys=("dayOfCycle",), justify="right"),
            Column(
                "Custom Fields",
                keys=("customFieldValues",),
                formatter=_count_formatter,
                justify="right",
            ),
            Column("Created", keys=("createdOn",)),
        ),
    ),
}
