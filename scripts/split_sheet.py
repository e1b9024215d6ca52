#!/usr/bin/env python3
"""
Print a split sheet from the Track Pace API, optionally saving it to history.

Exactly one of --speed, --pace or --time sets the pace.

Usage examples:
  - 800m at 4:00/km in lane 1, a mark every 100m:
      python scripts/split_sheet.py --base-url http://localhost:8000 --distance 800 --pace 4:00
  - 1200m in 3:30 total, lane 4, quarter-lap marks, saved as "Lap reps":
      python scripts/split_sheet.py --base-url http://localhost:8000 --distance 1200 \\
          --time 3:30 --lane 4 --mode lap --save "Lap reps"
"""

from __future__ import annotations

import argparse
import sys

try:
    import requests  # type: ignore
except Exception as exc:  # pragma: no cover
    print("This script requires the 'requests' package.\nInstall with: pip install requests", file=sys.stderr)
    raise


def post_json(base_url: str, path: str, payload: dict) -> dict:
    url = f"{base_url.rstrip('/')}/{path.lstrip('/')}"
    r = requests.post(url, json=payload, timeout=15)
    if r.status_code >= 300:
        raise RuntimeError(f"{path} -> HTTP {r.status_code}: {r.text}")
    return r.json()


def print_sheet(data: dict) -> None:
    print(
        f"{data['distance_m']:g}m lane {data['lane']}: "
        f"{data['speed_kmh']:.2f} km/h, {data['pace']}, total {data['total_time']}"
    )
    for s in data["splits"]:
        mark = f"{s['mark_m']:.1f}m {s['label']}" if s["label"] else f"{s['mark_m']:g}m"
        print(f"  {mark:<18}{s['interval_s']:>8.2f}s  {s['running']}")


def main() -> None:
    ap = argparse.ArgumentParser(description="Print track splits for a target pace")
    ap.add_argument("--base-url", required=True, help="API base URL (e.g., http://localhost:8000)")
    ap.add_argument("--distance", type=float, required=True, help="Distance in meters")
    source = ap.add_mutually_exclusive_group(required=True)
    source.add_argument("--speed", type=float, help="Speed in km/h")
    source.add_argument("--pace", help="Pace per km, M:SS.s")
    source.add_argument("--time", help="Target time for the distance, M:SS.s")
    ap.add_argument("--lane", type=int, default=None, help="Track lane (default from server settings)")
    ap.add_argument("--basis", type=float, default=None, help="Meters between marks (fixed mode)")
    ap.add_argument("--mode", choices=["fixed", "lap"], default="fixed")
    ap.add_argument("--save", metavar="NAME", help="Save the session to history under NAME")
    args = ap.parse_args()

    payload = {
        "distance_m": args.distance,
        "lane": args.lane,
        "basis_m": args.basis,
        "mode": args.mode,
        "speed_kmh": args.speed,
        "pace": args.pace,
        "target_time": args.time,
    }
    payload = {k: v for k, v in payload.items() if v is not None}

    print_sheet(post_json(args.base_url, "calculator", payload))

    if args.save:
        saved = post_json(args.base_url, "sessions", {**payload, "name": args.save})
        print(f"Saved session {saved['id']}: {saved['name']}")


if __name__ == "__main__":
    main()
