"""Command-line interface for tenant management.

Usage:
    mobs tenant create --name=<name>
    mobs tenant list
    mobs tenant get <TENANT_ID>
    mobs tenant delete <TENANT_ID>

Exits 0 on success and 1 (with a message on stderr) on any error.
"""

from __future__ import annotations

import argparse
import sys
from typing import TYPE_CHECKING

from pydantic import ValidationError as SettingsError
from sqlalchemy.exc import SQLAlchemyError

from mobs.domain.tenancy.tenant_service import TenantService
from mobs.foundation.domain.exceptions import DomainError
from mobs.infra.observability.logging import configure_logging, get_logger, get_logging_settings
from mobs.infra.persistence.database import get_database_manager
from mobs.infra.persistence.tenant_store import SqlTenantStore

if TYPE_CHECKING:
    from collections.abc import Sequence

    from mobs.domain.tenancy.tenant_metadata import TenantMetadata
    from mobs.foundation.domain.ports.tenant_store import TenantStorePort


def build_parser() -> argparse.ArgumentParser:
    """Build the ``mobs`` argument parser with its tenant subcommands."""
    parser = argparse.ArgumentParser(prog="mobs", description="Multi-tenant Object Storage CLI")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    resources = parser.add_subparsers(dest="resource", required=True)

    tenant = resources.add_parser("tenant", help="Manage tenants")
    commands = tenant.add_subparsers(dest="command", required=True)

    create = commands.add_parser("create", help="Create a new tenant")
    create.add_argument("--name", default="", help="Tenant name")
    create.set_defaults(handler=_create_tenant, failure="Failed to create tenant")

    list_ = commands.add_parser("list", help="List all tenants")
    list_.set_defaults(handler=_list_tenants, failure="Failed to list tenants")

    get = commands.add_parser("get", help="Get tenant details")
    get.add_argument("tenant_id", metavar="TENANT_ID")
    get.set_defaults(handler=_get_tenant, failure="Failed to get tenant")

    delete = commands.add_parser("delete", help="Delete a tenant")
    delete.add_argument("tenant_id", metavar="TENANT_ID")
    delete.set_defaults(handler=_delete_tenant, failure="Failed to delete tenant")

    return parser


def _create_tenant(service: TenantService, args: argparse.Namespace) -> int:
    if not args.name:
        print("--name is required", file=sys.stderr)
        return 1
    metadata = service.create_tenant(args.name)
    print(f"Tenant created: ID={metadata.tenant_id}, Name={metadata.name}")
    return 0


def _list_tenants(service: TenantService, args: argparse.Namespace) -> int:
    tenants = service.list_tenants()
    if not tenants:
        print("No tenants found.")
        return 0
    for metadata in tenants:
        print(f"ID={metadata.tenant_id}, Name={metadata.name}, Status={metadata.status}")
    return 0


def _get_tenant(service: TenantService, args: argparse.Namespace) -> int:
    _print_details(service.get_tenant(args.tenant_id))
    return 0


def _delete_tenant(service: TenantService, args: argparse.Namespace) -> int:
    service.delete_tenant(args.tenant_id)
    print(f"Tenant deleted: {args.tenant_id}")
    return 0


def _print_details(metadata: TenantMetadata) -> None:
    print(f"ID={metadata.tenant_id}")
    print(f"Name={metadata.name}")
    print(f"Status={metadata.status}")
    print(f"Bucket={metadata.bucket_name}")
    print(f"Region={metadata.region}")
    print(f"Version={metadata.version}")
    print(f"CreatedAt={metadata.created_at.isoformat()}")
    print(f"LastUpdatedAt={metadata.last_updated_at.isoformat()}")
    for key, value in sorted(metadata.provisioning_metadata.items()):
        print(f"Metadata.{key}={value}")


def open_default_store() -> SqlTenantStore:
    """Open the SQLite store described by StorageSettings.

    Creates the data directory and the tenants table when missing.
    """
    manager = get_database_manager()
    manager.ensure_data_dir()
    SqlTenantStore.ensure_table_exists(manager.get_engine())
    return SqlTenantStore(manager.get_session_factory(), region=manager.settings.region)


def main(argv: Sequence[str] | None = None, *, store: TenantStorePort | None = None) -> int:
    """Run the CLI.

    Args:
        argv: Arguments without the program name. Defaults to ``sys.argv[1:]``.
        store: Tenant store to use instead of the configured SQLite store.

    Returns:
        Process exit code.
    """
    parser = build_parser()
    try:
        args = parser.parse_args(argv)
    except SystemExit as exc:
        # argparse exits 2 on usage errors; this CLI reports every failure as 1
        return 0 if exc.code in (0, None) else 1

    settings = get_logging_settings()
    if args.verbose:
        settings = settings.model_copy(update={"log_level": "DEBUG"})
    configure_logging(settings)
    logger = get_logger(__name__)

    if store is None:
        try:
            store = open_default_store()
        except (OSError, SQLAlchemyError, SettingsError) as err:
            print(f"Failed to initialize storage: {err}", file=sys.stderr)
            return 1

    service = TenantService(store)
    logger.debug("command_started", resource=args.resource, command=args.command)
    try:
        return args.handler(service, args)
    except DomainError as err:
        logger.debug("command_failed", command=args.command, error_code=err.error_code)
        print(f"{args.failure}: {err}", file=sys.stderr)
        return 1
