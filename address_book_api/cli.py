"""
Command line front end for the Address Book API.

Usage:
    address-book list
    address-book add --name "Jane Doe" --email jane@example.com \
        --phone 555-1234 --address "1 Main St"

The server URL is taken from ``--base-url`` or the
``ADDRESS_BOOK_API_URL`` environment variable.
"""

import argparse
import logging
import sys
from typing import List, Optional

from address_book_api.client import AddressBookAPI, default_base_url
from address_book_api.views import ContactForm, ContactListView, format_contact


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="address-book", description="Address book client.")
    ap.add_argument("--base-url", default=None, help=f"API base URL (default: {default_base_url()})")
    ap.add_argument("-v", "--verbose", action="store_true", help="Log HTTP requests")
    sub = ap.add_subparsers(dest="command", required=True)

    sub.add_parser("list", help="List all contacts")

    add = sub.add_parser("add", help="Create a contact")
    add.add_argument("--name", required=True)
    add.add_argument("--email", required=True)
    add.add_argument("--phone", required=True)
    add.add_argument("--address", required=True)
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)
    api = AddressBookAPI(base_url=args.base_url)

    if args.command == "list":
        view = ContactListView(api)
        view.mount()
        if view.last_error:
            print(f"[!] {view.last_error['message']}", file=sys.stderr)
            return 1
        for line in view.render():
            print(line)
        return 0

    form = ContactForm(api)
    for field in ("name", "email", "phone", "address"):
        form.set_field(field, getattr(args, field))
    contact = form.submit()
    if contact is None:
        print(f"[!] {form.last_error['message']}", file=sys.stderr)
        return 1
    print(f"[+] Created contact {contact['id']}: {format_contact(contact)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
