"""
Sync the local herd database with Supabase.

Runs one pass: reference tables, then cattle and their records, then pushes
pending local changes back.

Usage:
    python scripts/sync_supabase.py [--full] [--pull-only] [--push-only] [--dry-run]
"""
import sys
import os
import argparse
import asyncio

# Add parent directory to path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from herdsync.config import Settings
from herdsync.db import create_session_factory
from herdsync.logging import setup_logging
from herdsync.services.reference_resolver import ReferenceResolver
from herdsync.services.store import LocalStore
from herdsync.services.supabase_client import SupabaseClient
from herdsync.services.sync_orchestrator import SyncContext, SyncOrchestrator, SyncReport


async def run_sync(settings: Settings, full: bool = False, pull: bool = True, push: bool = True, dry_run: bool = False) -> SyncReport:
    session_factory = create_session_factory(settings.database_url, create_tables=settings.auto_create_db)
    store = LocalStore(session_factory, dry_run=dry_run)
    try:
        async with SupabaseClient(settings) as remote:
            ctx = SyncContext(
                settings=settings,
                store=store,
                remote=remote,
                resolver=ReferenceResolver(store, gestation_days=settings.gestation_days),
            )
            orchestrator = SyncOrchestrator(ctx)
            return await orchestrator.run_cycle(full=full, pull=pull, push=push)
    finally:
        store.close()


def main():
    parser = argparse.ArgumentParser(
        description="Sync the local herd database with Supabase",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Pull and translate everything without writing
  python scripts/sync_supabase.py --dry-run

  # Normal incremental sync
  python scripts/sync_supabase.py

  # Ignore watermarks and re-pull every table (also tombstones rows deleted remotely)
  python scripts/sync_supabase.py --full
        """
    )
    parser.add_argument("--full", action="store_true", help="Ignore last-sync watermarks and pull everything")
    parser.add_argument("--pull-only", action="store_true", help="Skip pushing local changes")
    parser.add_argument("--push-only", action="store_true", help="Skip pulling remote changes")
    parser.add_argument("--dry-run", action="store_true", help="Don't make any changes")

    args = parser.parse_args()
    if args.pull_only and args.push_only:
        parser.error("--pull-only and --push-only are mutually exclusive")

    setup_logging()
    settings = Settings()

    if settings.database_url.startswith("sqlite:///./"):
        os.makedirs(os.path.dirname(settings.database_url.replace("sqlite:///", "")) or ".", exist_ok=True)

    print("=" * 70)
    print("Supabase Synchronization")
    print("=" * 70)
    print(f"Mode: {'DRY RUN' if args.dry_run else 'LIVE'}{' (full)' if args.full else ''}")
    print("=" * 70)

    report = asyncio.run(
        run_sync(
            settings,
            full=args.full,
            pull=not args.push_only,
            push=not args.pull_only,
            dry_run=args.dry_run,
        )
    )

    print(report.model_dump_json(indent=2))
    if report.status == "failed":
        print(f"\n[ERROR] Sync failed: {report.error}")
        sys.exit(1)
    if report.status == "partial":
        print("\n[WARN]  Some records failed; they will be retried on the next sync")


if __name__ == "__main__":
    main()
