"""Main CLI entry point for the KVCore toolkit."""

import argparse
import asyncio
import json
import logging
import sys
import traceback
from datetime import datetime, timezone

from kvcore_toolkit.client import KVCoreClient
from kvcore_toolkit.core import (
    DEFAULT_CALL_DIRECTION,
    KVCoreError,
    LEADTYPE_FILTER,
    LEAD_STATUS,
    OptIn,
    ValidationError,
    describe_call_result,
    is_valid_lead_type,
    label_for_status,
    load_server_settings,
)

logger = logging.getLogger(__name__)

PREVIEW_LENGTH = 100


def setup_logging(verbose: bool = False):
    """Configure logging for the CLI."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s",
    )
    logging.getLogger("httpx").setLevel(logging.WARNING)


def _build_client(args) -> KVCoreClient:
    """Create a client from the environment (and .env), honouring --debug."""
    client = KVCoreClient.from_env()
    if args.debug:
        client.enable_debug()
        print("Debug mode enabled")
        print()
    return client


def _records(result) -> list:
    """Pull the ``data`` list out of an upstream response."""
    if isinstance(result, dict) and isinstance(result.get("data"), list):
        return result["data"]
    return []


def _dump(value) -> str:
    return json.dumps(value, indent=2, default=str)


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


def _report_error(error: Exception, verbose: bool = False) -> None:
    print(f"Error: {error}", file=sys.stderr)
    if isinstance(error, KVCoreError) and error.response_body is not None:
        print(file=sys.stderr)
        print("API Response:", file=sys.stderr)
        print(_dump(error.response_body), file=sys.stderr)
    if verbose:
        traceback.print_exc()


def _run(coro_fn, args) -> None:
    """Run one async command, mapping toolkit errors to exit code 1."""
    try:
        asyncio.run(coro_fn(args))
    except KVCoreError as e:
        _report_error(e, args.verbose)
        sys.exit(1)


async def _find_contact_by_email(client: KVCoreClient, email: str) -> dict:
    result = await client.contacts.list({"filter[email]": email, "limit": 1})
    contacts = _records(result)
    if not contacts:
        raise KVCoreError(f"No contact found with email: {email}", 404)
    return contacts[0]


async def _search_contacts(args) -> None:
    if args.leadtype and not is_valid_lead_type(args.leadtype):
        options = ", ".join(sorted(LEADTYPE_FILTER))
        raise ValidationError(f"Invalid lead type '{args.leadtype}'. Must be one of: {options}")

    filters = {}
    if args.email:
        filters["filter[email]"] = args.email
    if args.first_name:
        filters["filter[first_name]"] = args.first_name
    if args.last_name:
        filters["filter[last_name]"] = args.last_name
    if args.status is not None:
        filters["filter[status]"] = args.status
    if args.leadtype:
        filters["filter[leadtype]"] = args.leadtype
    filters["limit"] = args.limit

    async with _build_client(args) as client:
        print("Searching for contacts...")
        print(f"Filters: {_dump(filters)}")
        print()

        contacts = _records(await client.contacts.list(filters))
        if not contacts:
            print("No contacts found matching the search criteria.")
            return

        print(f"Found {len(contacts)} contact(s):")
        print()
        for idx, contact in enumerate(contacts, start=1):
            status = contact.get("status")
            print(f"{idx}. {contact.get('first_name')} {contact.get('last_name')}")
            print(f"   ID: {contact.get('id')}")
            print(f"   Email: {contact.get('email') or 'N/A'}")
            print(f"   Phone: {contact.get('cell_phone_1') or 'N/A'}")
            print(f"   Status: {label_for_status(status) or status}")
            print(f"   Deal Type: {contact.get('deal_type') or 'N/A'}")
            print(f"   Created: {contact.get('created_at') or 'N/A'}")
            print()

        if len(contacts) == 1:
            await _show_contact_details(client, contacts[0].get("id"))

        print("Search completed successfully!")


async def _show_contact_details(client: KVCoreClient, contact_id) -> None:
    print("Fetching additional details for this contact...")
    print()
    print("Full Contact Details:")
    print(_dump(await client.contacts.get(contact_id)))
    print()

    # Notes and call logs may be unavailable for a contact
    try:
        notes = _records(await client.notes.list(contact_id))
    except KVCoreError as e:
        logger.debug(f"Notes unavailable for contact {contact_id}: {e}")
        notes = []
    if notes:
        print(f"Notes ({len(notes)}):")
        for idx, note in enumerate(notes, start=1):
            print(f"  {idx}. {note.get('title') or 'Untitled'}")
            print(f"     Date: {note.get('date')}")
            print(f"     Details: {note.get('details') or 'N/A'}")
        print()

    try:
        calls = _records(await client.calls.list(contact_id))
    except KVCoreError as e:
        logger.debug(f"Call logs unavailable for contact {contact_id}: {e}")
        calls = []
    if calls:
        print(f"Call Logs ({len(calls)}):")
        for idx, call in enumerate(calls, start=1):
            result = call.get("result")
            print(f"  {idx}. {call.get('direction') or 'N/A'} call")
            print(f"     Date: {call.get('date')}")
            print(f"     Result: {describe_call_result(result) or result}")
            print(f"     Notes: {call.get('notes') or 'N/A'}")
        print()


async def _create_contact(args) -> None:
    payload = {
        "first_name": args.first_name,
        "last_name": args.last_name,
        "email": args.email,
        "deal_type": args.deal_type,
        "status": args.status,
        "email_optin": int(OptIn.ENABLED),
        "phone_on": int(OptIn.ENABLED),
        "text_on": int(OptIn.ENABLED),
        "capture_method": "API Integration",
    }
    if args.phone:
        payload["cell_phone_1"] = args.phone

    async with _build_client(args) as client:
        print("Creating a new contact...")
        created = await client.contacts.create(payload)
        contact = created.get("data", created) if isinstance(created, dict) else {}
        contact_id = contact.get("id") if isinstance(contact, dict) else None
        if contact_id is None:
            raise KVCoreError("Contact was created but the API returned no ID", 502, created)

        print("Contact created successfully!")
        print(f"Contact ID: {contact_id}")
        print(f"Name: {contact.get('first_name')} {contact.get('last_name')}")
        print()

        print("Adding a note to the contact...")
        await client.notes.create(contact_id, {
            "date": _now(),
            "title": "Initial Contact",
            "details": "Contact created via API integration.",
        })
        print("Note added successfully!")

        print("Logging a call...")
        await client.calls.create(contact_id, {
            "date": _now(),
            "direction": DEFAULT_CALL_DIRECTION,
            "result": 3,
            "notes": "Initial outreach call.",
        })
        print("Call logged successfully!")

        print("Adding tags to the contact...")
        tags = [{"name": "#new-lead", "locked": False}]
        if args.deal_type:
            tags.append({"name": f"#{args.deal_type.split(',')[0].strip()}", "locked": False})
        await client.contacts.add_tags(contact_id, tags)
        print("Tags added successfully!")
        print()

        print("Updated Contact:")
        print(_dump(await client.contacts.get(contact_id)))
        print()
        print(f"✓ All operations completed successfully! Contact ID {contact_id} is ready.")


def _split_target(args) -> tuple:
    """
    Split the positional words into (contact_id, remaining words).

    With --search-email the contact is looked up later and every word is
    content; otherwise the first word is the contact ID.
    """
    words = list(args.words)
    if args.search_email:
        return None, words
    return words[0], words[1:]


async def _resolve_contact(client: KVCoreClient, args, contact_id) -> tuple:
    """Return (contact_id, contact or None), looking the contact up by email if asked."""
    if not args.search_email:
        return contact_id, None

    print(f"Searching for contact with email: {args.search_email}...")
    contact = await _find_contact_by_email(client, args.search_email)
    contact_id = contact.get("id")
    print(f"Found contact: {contact.get('first_name')} {contact.get('last_name')} (ID: {contact_id})")
    return contact_id, contact


async def _send_email(args) -> None:
    contact_id, words = _split_target(args)
    subject = words[0].strip() if words else ""
    message = " ".join(words[1:]).strip()
    if not subject:
        raise ValidationError("Subject cannot be empty")
    if not message:
        raise ValidationError("Message cannot be empty")

    async with _build_client(args) as client:
        contact_id, contact = await _resolve_contact(client, args, contact_id)
        if contact is not None:
            print(f"Email: {contact.get('email') or 'N/A'}")
            print(f"Email opt-in: {'Yes' if contact.get('email_optin') else 'No'}")
            print()
            if not contact.get("email_optin"):
                logger.warning("Email opt-in is not enabled for this contact; the email may not be delivered.")
            if not contact.get("email"):
                raise ValidationError("Contact does not have an email address on file.")

        preview = message[:PREVIEW_LENGTH] + ("..." if len(message) > PREVIEW_LENGTH else "")
        print("Sending email...")
        print(f"Contact ID: {contact_id}")
        print(f'Subject: "{subject}"')
        print(f'Message: "{preview}"')
        print()

        result = await client.contacts.send_email(contact_id, {"subject": subject, "message": message})
        print("✓ Email sent successfully!")
        if isinstance(result, dict) and result.get("data"):
            print()
            print("Response:")
            print(_dump(result["data"]))


async def _send_sms(args) -> None:
    contact_id, words = _split_target(args)
    message = " ".join(words).strip()
    if not message:
        raise ValidationError("Message cannot be empty")

    async with _build_client(args) as client:
        contact_id, contact = await _resolve_contact(client, args, contact_id)
        if contact is not None:
            print(f"Phone: {contact.get('cell_phone_1') or 'N/A'}")
            print(f"Text enabled: {'Yes' if contact.get('text_on') else 'No'}")
            print()
            if not contact.get("text_on"):
                logger.warning("Text messaging is not enabled for this contact; the SMS may not be delivered.")
            if not contact.get("cell_phone_1"):
                raise ValidationError("Contact does not have a phone number on file.")

        print("Sending SMS...")
        print(f"Contact ID: {contact_id}")
        print(f'Message: "{message}"')
        print()

        result = await client.contacts.send_text(contact_id, {"message": message})
        print("✓ SMS sent successfully!")
        if isinstance(result, dict) and result.get("data"):
            print()
            print("Response:")
            print(_dump(result["data"]))


def cmd_search_contacts(args):
    """Handle the search-contacts command."""
    _run(_search_contacts, args)


def cmd_create_contact(args):
    """Handle the create-contact command."""
    _run(_create_contact, args)


def cmd_send_email(args):
    """Handle the send-email command."""
    _run(_send_email, args)


def cmd_send_sms(args):
    """Handle the send-sms command."""
    _run(_send_sms, args)


def cmd_serve(args):
    """Handle the serve command - run the HTTP server under uvicorn."""
    import uvicorn

    from kvcore_toolkit.server import create_app

    try:
        settings = load_server_settings()
        app = create_app(settings)
    except KVCoreError as e:
        _report_error(e, args.verbose)
        sys.exit(1)

    uvicorn.run(
        app,
        host=args.host or settings.host,
        port=args.port or settings.port,
        log_level="debug" if args.verbose else "info",
    )


def _contact_target(parser: argparse.ArgumentParser, content: str) -> None:
    parser.add_argument("--search-email", help="Look the contact up by email instead of passing CONTACT_ID")
    parser.add_argument("words", nargs="+", metavar="WORD", help=f"[CONTACT_ID] {content}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="kvcore",
        description="KVCore Public API v2 toolkit",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable verbose logging")
    parser.add_argument("--debug", action="store_true", help="Log every KVCore request and response")

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    status_help = ", ".join(f"{code}={label}" for code, label in LEAD_STATUS.items())

    # Search-contacts command
    search_parser = subparsers.add_parser("search-contacts", help="Search contacts")
    search_parser.add_argument("--email", help="Filter by email")
    search_parser.add_argument("--first-name", help="Filter by first name")
    search_parser.add_argument("--last-name", help="Filter by last name")
    search_parser.add_argument(
        "--status", type=int, choices=sorted(LEAD_STATUS), help=f"Filter by status ({status_help})"
    )
    search_parser.add_argument("--leadtype", help=f"Filter by lead type ({', '.join(sorted(LEADTYPE_FILTER))})")
    search_parser.add_argument("--limit", type=int, default=10, help="Maximum results (default: 10)")
    search_parser.set_defaults(func=cmd_search_contacts)

    # Create-contact command
    create_parser = subparsers.add_parser(
        "create-contact", help="Create a contact with an initial note, call and tags"
    )
    create_parser.add_argument("--first-name", required=True, help="First name")
    create_parser.add_argument("--last-name", required=True, help="Last name")
    create_parser.add_argument("--email", required=True, help="Email address")
    create_parser.add_argument("--phone", help="Cell phone")
    create_parser.add_argument("--deal-type", default="buyer", help="buyer, seller, renter (comma-separated)")
    create_parser.add_argument(
        "--status", type=int, choices=sorted(LEAD_STATUS), default=0, help=f"Lead status ({status_help})"
    )
    create_parser.set_defaults(func=cmd_create_contact)

    # Send-email command
    email_parser = subparsers.add_parser("send-email", help="Send an email to a contact")
    _contact_target(email_parser, "SUBJECT MESSAGE...")
    email_parser.set_defaults(func=cmd_send_email)

    # Send-sms command
    sms_parser = subparsers.add_parser("send-sms", help="Send a text message to a contact")
    _contact_target(sms_parser, "MESSAGE...")
    sms_parser.set_defaults(func=cmd_send_sms)

    # Serve command
    serve_parser = subparsers.add_parser("serve", help="Run the HTTP pass-through server")
    serve_parser.add_argument("--host", help="Bind address (default: HOST or 0.0.0.0)")
    serve_parser.add_argument("--port", type=int, help="Port (default: PORT or 3000)")
    serve_parser.set_defaults(func=cmd_serve)

    return parser


def main(argv=None):
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(args.verbose)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    args.func(args)


if __name__ == "__main__":
    main()
