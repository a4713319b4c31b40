#!/usr/bin/env python3
"""Dump what the admin console would show for a live backend.

Loads the dashboard snapshot and the branch list, printing counts, the
recent items per collection, and any notices raised along the way.

Usage
-----
Set the backend address and run::

    export ORGADMIN_API_BASE_URL="https://api.example.org/api"
    python scripts/dump_dashboard.py

Options::

    --json               Output as machine-readable JSON
    --output FILE        Write output to FILE instead of stdout
    --skip-branches      Skip the full branch list
    --verbose            Enable debug logging
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

# Allow running from the repo root without installing the package.
_repo = Path(__file__).resolve().parent.parent
_src = _repo / "src"
if _src.is_dir():
    sys.path.insert(0, str(_src))

from orgadmin import AdminConfig, CollectionSummary, OrgAdminClient  # noqa: E402

# ── helpers ──────────────────────────────────────────────────


def _section(title: str) -> str:
    line = "=" * 60
    return f"\n{line}\n  {title}\n{line}"


def _print_summary(title: str, summary: CollectionSummary[Any], out: list[str]) -> None:
    out.append(_section(f"{title} (count={summary.count})"))
    if not summary.recent:
        out.append("  <none>")
    for item in summary.recent:
        fields = item.model_dump(exclude={"id"})
        details = ", ".join(f"{key}={value}" for key, value in fields.items() if value not in ("", None))
        out.append(f"  - {item.id}: {details}")


# ── main ─────────────────────────────────────────────────────


async def main() -> None:
    parser = argparse.ArgumentParser(
        description="Dump the admin dashboard and branch list for debugging / development.",
    )
    parser.add_argument("--json", action="store_true", dest="json_mode", help="Output machine-readable JSON")
    parser.add_argument("--output", "-o", help="Write output to FILE instead of stdout")
    parser.add_argument("--skip-branches", action="store_true", help="Skip the full branch list")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    else:
        logging.basicConfig(level=logging.WARNING)

    config = AdminConfig.from_env()
    result: dict[str, Any] = {
        "timestamp": datetime.now(UTC).isoformat(),
        "base_url": config.base_url,
    }

    out: list[str] = []
    out.append(_section("orgadmin dump_dashboard"))
    out.append(f"  time      : {result['timestamp']}")
    out.append(f"  backend   : {config.base_url}")

    async with OrgAdminClient(config) as client:
        dashboard = client.dashboard()
        snapshot = await dashboard.activate()
        result["dashboard"] = snapshot.model_dump(mode="json")
        if dashboard.last_error is not None:
            result["dashboard_error"] = str(dashboard.last_error)
            out.append(f"  dashboard : FAILED ({dashboard.last_error})")

        _print_summary("Recent Contact Requests", snapshot.contacts, out)
        _print_summary("Recent Branches", snapshot.branches, out)
        _print_summary("Recent Routes", snapshot.routes, out)

        if not args.skip_branches:
            page = client.branch_manager()
            branches = await page.list()
            result["branches"] = [branch.model_dump(mode="json") for branch in branches]
            result["notices"] = [notice.model_dump(mode="json") for notice in page.notices]
            out.append(_section(f"BRANCHES ({len(branches)})"))
            for branch in branches:
                out.append(f"  - {branch.id}: {branch.name} [{branch.district}] manager={branch.manager}")
            for notice in page.notices:
                out.append(f"  ! {notice.level}: {notice.message}")

    payload = json.dumps(result, indent=2, default=str, ensure_ascii=False)
    if args.json_mode and not args.output:
        print(payload)
        return
    if not args.json_mode:
        print("\n".join(out))
    if args.output:
        Path(args.output).write_text(payload, encoding="utf-8")
        print(f"JSON written to {args.output}", file=sys.stderr)


if __name__ == "__main__":
    asyncio.run(main())
