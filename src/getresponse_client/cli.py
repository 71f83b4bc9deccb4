"""Command-line interface for interacting with the GetResponse contacts API."""
from __future__ import annotations

import json
import os
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

import typer

try:  # pragma: no cover - exercised in runtime environments
    from rich import box
    from rich.console import Console
    from rich.table import Table
except ImportError as exc:  # pragma: no cover - optional dependency guard
    raise RuntimeError(
        "The CLI requires Rich for table rendering. Install the CLI extras via "
        "'pip install getresponse-client[cli]' to enable this command."
    ) from exc

from . import GetResponseClient
from .auth import ApiKeyAuth
from .cli_schema import CLI_TABLE_VIEWS, TableView
from .config import DEFAULT_BASE_URL
from .exceptions import DecodeError, GetResponseError, RemoteError
from .models import DeleteContactRequest, GetContactRequest, GetContactsRequest

app = typer.Typer(help="GetResponse contact management CLI.", no_args_is_help=True)

contacts_app = typer.Typer(help="Contact operations.")
app.add_typer(contacts_app, name="contacts")


def _build_client(
    base_url: str,
    api_key: str | None,
    domain: str | None,
    verify_ssl: bool,
    cert_path: Path | None,
    timeout: float,
) -> GetResponseClient:
    if not api_key:
        raise typer.BadParameter("--api-key (or GETRESPONSE_API_KEY) is required.")

    verify_target: bool | str
    if cert_path:
        expanded_cert = cert_path.expanduser()
        if not expanded_cert.exists():
            raise typer.BadParameter("Certificate file not found for --cert option.")
        if not verify_ssl:
            raise typer.BadParameter("Cannot combine --cert with --no-verify.")
        verify_target = str(expanded_cert)
    else:
        verify_target = verify_ssl

    try:
        return GetResponseClient(
            base_url=base_url,
            auth_strategy=ApiKeyAuth(api_key=api_key, domain=domain or None),
            verify_ssl=verify_target,
            timeout=timeout,
        )
    except GetResponseError as exc:
        raise typer.BadParameter(str(exc)) from exc


def _echo_json(payload: Any) -> None:
    typer.echo(json.dumps(payload, indent=2))


console = Console(force_terminal=False, color_system=None)


def _render_rich_table(view: TableView, rows: Sequence[Mapping[str, Any]]) -> None:
    table = Table(
        title=view.title,
        box=box.SIMPLE,
        show_lines=False,
        header_style="bold cyan",
    )
    for column in view.columns:
        table.add_column(column.header, justify=column.justify)
    for row in rows:
        table.add_row(*(column.render(row) for column in view.columns))
    console.print(table)


def _present_output(payload: Any, *, view_id: str | None, json_output: bool) -> None:
    if json_output or view_id is None:
        _echo_json(payload)
        return
    view = CLI_TABLE_VIEWS.get(view_id)
    if not view or not isinstance(payload, list) or not payload:
        _echo_json(payload)
        return
    _render_rich_table(view, payload)


def _handle_request_error(exc: GetResponseError) -> None:
    if isinstance(exc, RemoteError):
        message = f"GetResponse API error (status {exc.status_code}, code {exc.code}): {exc}"
        if exc.more_info:
            message += f"\nMore info: {exc.more_info}"
    elif isinstance(exc, DecodeError):
        body = exc.body.decode("utf-8", errors="replace")
        message = f"{exc}\nBody: {body[:200]}"
    else:
        message = f"Request failed: {exc}"
    typer.secho(message, err=True, fg=typer.colors.RED)
    raise typer.Exit(code=1)


def _parse_pairs(values: Sequence[str], option: str) -> dict[str, str]:
    pairs: dict[str, str] = {}
    for item in values:
        if "=" not in item:
            raise typer.BadParameter(f"{option} expects key=value, got {item!r}.")
        key, value = item.split("=", 1)
        pairs[key.strip()] = value.strip()
    return pairs


def _shared_options() -> dict[str, Any]:  # pragma: no cover - helper indirection
    # Accept common falsey representations (0/false/no/off) for GETRESPONSE_VERIFY_SSL.
    env_verify = os.getenv("GETRESPONSE_VERIFY_SSL")
    default_verify = env_verify is None or env_verify.strip().lower() not in {
        "0",
        "false",
        "no",
        "off",
    }

    return {
        "base_url": typer.Option(
            DEFAULT_BASE_URL,
            "--base-url",
            envvar="GETRESPONSE_BASE_URL",
            help="GetResponse API base URL.",
            show_default=True,
        ),
        "api_key": typer.Option(
            None,
            "--api-key",
            "-k",
            envvar="GETRESPONSE_API_KEY",
            help="GetResponse API key.",
            hide_input=True,
        ),
        "domain": typer.Option(
            None,
            "--domain",
            "-d",
            envvar="GETRESPONSE_DOMAIN",
            help="Account domain sent as X-Domain (Enterprise accounts).",
        ),
        "verify_ssl": typer.Option(
            default_verify,
            "--verify/--no-verify",
            envvar="GETRESPONSE_VERIFY_SSL",
            help="Enable or disable TLS certificate verification.",
            show_default=True,
        ),
        "cert_path": typer.Option(
            None,
            "--cert",
            envvar="GETRESPONSE_CA_CERT",
            help="Path to a custom CA bundle for TLS verification.",
        ),
        "timeout": typer.Option(30.0, help="Request timeout (seconds).", show_default=True),
        "output_json": typer.Option(
            False,
            "--json",
            "-j",
            help="Return raw JSON instead of rendering a table.",
        ),
    }


_SHARED_OPTIONS = _shared_options()


@contacts_app.command("list")
def contacts_list(
    query: list[str] = typer.Option([], "--query", "-q", help="Filter in field=value form."),
    sort: list[str] = typer.Option([], "--sort", "-s", help="Sort in field=asc|desc form."),
    fields: list[str] = typer.Option([], "--field", "-f", help="Field to include."),
    page: int = typer.Option(1, "--page", help="Page number.", show_default=True),
    per_page: int = typer.Option(100, "--per-page", help="Page size.", show_default=True),
    additional_flags: str | None = typer.Option(
        None, "--additional-flags", help="Value for the additionalFlags query parameter."
    ),
    base_url: str = _SHARED_OPTIONS["base_url"],
    api_key: str | None = _SHARED_OPTIONS["api_key"],
    domain: str | None = _SHARED_OPTIONS["domain"],
    verify_ssl: bool = _SHARED_OPTIONS["verify_ssl"],
    cert_path: Path | None = _SHARED_OPTIONS["cert_path"],
    timeout: float = _SHARED_OPTIONS["timeout"],
    output_json: bool = _SHARED_OPTIONS["output_json"],
) -> None:
    """List contacts in the order the API returns them."""

    request = GetContactsRequest(
        query=_parse_pairs(query, "--query"),
        sort=_parse_pairs(sort, "--sort"),
        fields=list(fields),
        page=page,
        per_page=per_page,
        additional_flags=additional_flags,
    )
    with _build_client(
        base_url=base_url,
        api_key=api_key,
        domain=domain,
        verify_ssl=verify_ssl,
        cert_path=cert_path,
        timeout=timeout,
    ) as client:
        try:
            result = client.contacts.list(request)
        except GetResponseError as exc:
            _handle_request_error(exc)
            return
    rows = [contact.to_payload() for contact in result.contacts]
    _present_output(rows, view_id="contacts.list", json_output=output_json)


@contacts_app.command("get")
def contacts_get(
    contact_id: str = typer.Argument(..., help="Contact identifier."),
    fields: list[str] = typer.Option([], "--field", "-f", help="Field to include."),
    base_url: str = _SHARED_OPTIONS["base_url"],
    api_key: str | None = _SHARED_OPTIONS["api_key"],
    domain: str | None = _SHARED_OPTIONS["domain"],
    verify_ssl: bool = _SHARED_OPTIONS["verify_ssl"],
    cert_path: Path | None = _SHARED_OPTIONS["cert_path"],
    timeout: float = _SHARED_OPTIONS["timeout"],
) -> None:
    """Show a single contact as JSON."""

    with _build_client(
        base_url=base_url,
        api_key=api_key,
        domain=domain,
        verify_ssl=verify_ssl,
        cert_path=cert_path,
        timeout=timeout,
    ) as client:
        try:
            result = client.contacts.get(GetContactRequest(id=contact_id, fields=list(fields)))
        except GetResponseError as exc:
            _handle_request_error(exc)
            return
    _echo_json(result.contact.to_payload())


@contacts_app.command("delete")
def contacts_delete(
    contact_id: str = typer.Argument(..., help="Contact identifier."),
    message_id: str = typer.Option("", "--message-id", help="Message the unsubscribe came from."),
    ip_address: str = typer.Option("", "--ip-address", help="IP address of the requester."),
    base_url: str = _SHARED_OPTIONS["base_url"],
    api_key: str | None = _SHARED_OPTIONS["api_key"],
    domain: str | None = _SHARED_OPTIONS["domain"],
    verify_ssl: bool = _SHARED_OPTIONS["verify_ssl"],
    cert_path: Path | None = _SHARED_OPTIONS["cert_path"],
    timeout: float = _SHARED_OPTIONS["timeout"],
) -> None:
    """Delete a contact."""

    with _build_client(
        base_url=base_url,
        api_key=api_key,
        domain=domain,
        verify_ssl=verify_ssl,
        cert_path=cert_path,
        timeout=timeout,
    ) as client:
        try:
            client.contacts.delete(
                DeleteContactRequest(id=contact_id, message_id=message_id, ip_address=ip_address)
            )
        except GetResponseError as exc:
            _handle_request_error(exc)
            return
    typer.echo(f"Deleted contact {contact_id}.")


def main() -> None:  # pragma: no cover - console entrypoint
    app()


if __name__ == "__main__":  # pragma: no cover
    main()
