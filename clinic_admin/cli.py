"""
Command-line admin for patients and doctors.

    clinic-admin patients list
    clinic-admin patients add --first-name Jane --last-name Doe --email jane@x.com
    clinic-admin doctors edit 42 --specialty Cardiology
    clinic-admin doctors delete 42 --yes
"""
import argparse
import asyncio
import sys
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple

from clinic_admin.config import get_settings
from clinic_admin.constants import Gender, Resource
from clinic_admin.schemas import PersonBase
from clinic_admin.services.api_client import ApiError
from clinic_admin.services.clinic_api import ClinicApi
from clinic_admin.services.resource_client import ResourceClient
from clinic_admin.utils.logger import get_logger

logger = get_logger("cli")

SINGULAR = {Resource.PATIENTS: "patient", Resource.DOCTORS: "doctor"}

# (option, field, required on add, choices)
COMMON_FIELDS: List[Tuple[str, str, bool, Optional[List[str]]]] = [
    ("--first-name", "firstName", True, None),
    ("--last-name", "lastName", True, None),
    ("--email", "email", True, None),
    ("--phone", "phone", False, None),
]
RESOURCE_FIELDS: Dict[Resource, List[Tuple[str, str, bool, Optional[List[str]]]]] = {
    Resource.PATIENTS: [
        ("--dob", "dob", False, None),
        ("--gender", "gender", False, [g.value for g in Gender]),
    ],
    Resource.DOCTORS: [
        ("--specialty", "specialty", True, None),
        ("--rpps", "rpps", False, None),
        ("--clinic-address", "clinicAddress", False, None),
    ],
}

# column title -> value getter
TABLE_COLUMNS: Dict[Resource, List[Tuple[str, Callable[[Any], str]]]] = {
    Resource.PATIENTS: [
        ("Name", lambda p: p.full_name),
        ("Email", lambda p: p.email),
        ("Date of Birth", lambda p: p.dob or "N/A"),
    ],
    Resource.DOCTORS: [
        ("Name", lambda d: d.full_name),
        ("Email", lambda d: d.email),
        ("Specialty", lambda d: d.specialty),
    ],
}


def _fields_for(resource: Resource):
    return COMMON_FIELDS + RESOURCE_FIELDS[resource]


def _add_field_options(parser: argparse.ArgumentParser, resource: Resource, for_add: bool) -> None:
    for option, field, required, choices in _fields_for(resource):
        parser.add_argument(
            option,
            dest=field,
            required=for_add and required,
            choices=choices,
            default=None,
        )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="clinic-admin", description="Manage clinic patients and doctors.")
    parser.add_argument("--base-url", default=None, help="Backend URL (defaults to API_BASE_URL)")
    resources = parser.add_subparsers(dest="resource", required=True)

    for resource in Resource:
        res_parser = resources.add_parser(resource.value, help=f"Manage {resource.value}")
        commands = res_parser.add_subparsers(dest="command", required=True)

        commands.add_parser("list", help=f"List all {resource.value}")

        show = commands.add_parser("show", help=f"Show one {SINGULAR[resource]}")
        show.add_argument("id")

        add = commands.add_parser("add", help=f"Create a {SINGULAR[resource]}")
        _add_field_options(add, resource, for_add=True)

        edit = commands.add_parser("edit", help=f"Update a {SINGULAR[resource]}")
        edit.add_argument("id")
        _add_field_options(edit, resource, for_add=False)

        delete = commands.add_parser("delete", help=f"Delete a {SINGULAR[resource]}")
        delete.add_argument("id")
        delete.add_argument("--yes", "-y", action="store_true", help="Do not ask for confirmation")

    return parser


def _collect_fields(args: argparse.Namespace, resource: Resource) -> Dict[str, Any]:
    values = {}
    for _, field, _, _ in _fields_for(resource):
        value = getattr(args, field, None)
        if value is not None:
            values[field] = value
    return values


def render_table(resource: Resource, items: Sequence[PersonBase]) -> str:
    if not items:
        return f"No {resource.value} found."
    columns = [("ID", lambda e: e.id or "")] + TABLE_COLUMNS[resource]
    rows = [[getter(item) for _, getter in columns] for item in items]
    widths = [
        max(len(title), *(len(row[i]) for row in rows))
        for i, (title, _) in enumerate(columns)
    ]
    lines = ["  ".join(title.ljust(w) for (title, _), w in zip(columns, widths)).rstrip()]
    lines.append("  ".join("-" * w for w in widths))
    for row in rows:
        lines.append("  ".join(cell.ljust(w) for cell, w in zip(row, widths)).rstrip())
    return "\n".join(lines)


def render_entity(entity: PersonBase) -> str:
    data = entity.model_dump(mode="json", exclude_none=True)
    width = max(len(k) for k in data)
    return "\n".join(f"{key.ljust(width)} : {value}" for key, value in data.items())


def _confirm(prompt: str) -> bool:
    try:
        answer = input(f"{prompt} [y/N] ")
    except EOFError:
        return False
    return answer.strip().lower() in ("y", "yes")


async def _list(client: ResourceClient, resource: Resource) -> None:
    items = await client.get_all()
    print(render_table(resource, items))


async def run_command(
    args: argparse.Namespace,
    api: ClinicApi,
    confirm: Callable[[str], bool] = _confirm,
) -> int:
    """Execute one parsed command; returns the process exit code."""
    resource = Resource(args.resource)
    singular = SINGULAR[resource]
    client = api.client_for(resource)

    action = "load"
    try:
        if args.command == "list":
            action = "load"
            await _list(client, resource)

        elif args.command == "show":
            entity = await client.get_one(args.id)
            print(render_entity(entity))

        elif args.command == "add":
            action = "save"
            created = await client.create(_collect_fields(args, resource))
            print(f"Created {singular} {created.id}")

        elif args.command == "edit":
            current = await client.get_one(args.id)
            action = "save"
            changes = _collect_fields(args, resource)
            entity = client.model.model_validate({**current.model_dump(), **changes})
            updated = await client.update(args.id, entity)
            print(f"Updated {singular} {updated.id or args.id}")

        elif args.command == "delete":
            action = "delete"
            if not args.yes and not confirm(f"Are you sure you want to delete this {singular}?"):
                print("Cancelled")
                return 0
            await client.delete(args.id)
            print(f"Deleted {singular} {args.id}")
            # refresh the list after deletion
            action = "load"
            await _list(client, resource)

    except (ApiError, ValueError) as e:
        target = resource.value if args.command in ("list", "delete") and action == "load" else singular
        logger.error(f"Failed to {action} {target}: {e}")
        print(f"Failed to {action} {target}: {e}", file=sys.stderr)
        return 1
    return 0


async def _main(args: argparse.Namespace) -> int:
    async with ClinicApi.from_settings(get_settings(), base_url=args.base_url) as api:
        return await run_command(args, api)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    return asyncio.run(_main(args))


if __name__ == "__main__":
    sys.exit(main())
