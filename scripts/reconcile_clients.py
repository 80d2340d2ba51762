#!/usr/bin/env python3
"""
Recompute total_due / total_paid for every client.

Repairs totals left stale by writes that returned reconciliation warnings.

Usage:
  python -m scripts.reconcile_clients
  # Uses STORE_BACKEND / DATABASE_URL / RECORD_SERVICE_URL from .env (or export)
"""
import asyncio
import os
import sys
from typing import List, Tuple

from dotenv import load_dotenv

# Load .env from project root
_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
load_dotenv(os.path.join(_root, ".env"))

from app.config import settings  # noqa: E402
from app.core.logging import setup_logging  # noqa: E402
from app.services.client_service import ClientService  # noqa: E402
from app.store.base import RecordStore  # noqa: E402
from app.store.factory import build_store  # noqa: E402


async def reconcile_all(store: RecordStore) -> Tuple[List[int], List[Tuple[int, str]]]:
    """Returns (repaired client ids, [(client id, failure detail)])."""
    listed = await ClientService.list_clients(store)
    if not listed.ok:
        raise RuntimeError(listed.detail)

    repaired, failed = [], []
    for client in listed.value:
        result = await ClientService.reconcile_client(store, client.id)
        if result.ok:
            repaired.append(client.id)
        else:
            failed.append((client.id, result.detail))
    return repaired, failed


async def _run() -> int:
    store = await build_store(settings)
    try:
        repaired, failed = await reconcile_all(store)
    finally:
        await store.close()

    print(f"Reconciled {len(repaired)} client(s).")
    for client_id, detail in failed:
        print(f"FAILED: client {client_id}: {detail}")
    return 1 if failed else 0


def main():
    setup_logging()
    sys.exit(asyncio.run(_run()))


if __name__ == "__main__":
    main()
