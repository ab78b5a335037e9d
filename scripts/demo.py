#!/usr/bin/env python3
"""Console walkthrough of the store driving three rendered slots.

Each slot gets a listener that "re-renders" by printing its current value,
the way a UI widget would rebuild on notification.

Usage:
    python scripts/demo.py            # run the walkthrough
    python scripts/demo.py --trace    # also print every store event
    python scripts/demo.py -v         # DEBUG logging from the store
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path
from typing import Any

_repo = Path(__file__).resolve().parent.parent
_src = _repo / "src"
if _src.is_dir():
    sys.path.insert(0, str(_src))

from statemgmt import StateStore, StoreConfig, StoreEvent  # noqa: E402


def _render(store: StateStore, key: str) -> None:
    print(f"  [{key}] {json.dumps(store.get_state(key), ensure_ascii=False)}")


def _print_event(event: StoreEvent) -> None:
    status = "applied" if event.applied else f"skipped ({event.reason})"
    print(f"    · {event.operation} {event.key} {status}")


async def _load_age() -> Any:
    await asyncio.sleep(0.1)
    return 31


async def _run(store: StateStore) -> None:
    store.init_state("numbers", [1, 2, 3])
    store.init_state("userInfo", {"name": "Alice", "age": 30})
    store.init_state("nestedState", {"address": {"city": "Hanoi", "zip": "100000"}})

    unsubscribers = [store.add_listener(key, lambda key=key: _render(store, key)) for key in store.keys()]
    for key in store.keys():
        _render(store, key)

    print("add number")
    numbers = list(store.get_state("numbers", []))
    store.update_state_sync("numbers", [*numbers, numbers[-1] + 1 if numbers else 1])

    print("same numbers again (no render expected)")
    store.update_state_sync("numbers", list(store.get_state("numbers")))

    print("reset numbers")
    store.reset_state("numbers", [])

    print("rename user")
    store.update_state_sync("userInfo", {**store.get_state("userInfo"), "name": "Bob"})

    print("load age asynchronously")
    await store.update_state_async("userInfo", _load_age_into(store))

    print("move to another city")
    store.update_nested_state("nestedState", "address.city", "Da Nang")

    print("update a missing path (no render expected)")
    store.update_nested_state("nestedState", "office.city", "Hue")

    for unsubscribe in unsubscribers:
        unsubscribe()


async def _load_age_into(store: StateStore) -> Any:
    age = await _load_age()
    return {**store.get_state("userInfo"), "age": age}


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__, formatter_class=argparse.RawDescriptionHelpFormatter)
    parser.add_argument("--trace", action="store_true", help="print every store event")
    parser.add_argument("--legacy-map-equality", action="store_true", help="use one-directional map comparison")
    parser.add_argument("-v", "--verbose", action="store_true", help="DEBUG logging")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = StoreConfig.from_env(
        **({"symmetric_map_equality": False} if args.legacy_map_equality else {}),
        **({"log_values": True} if args.verbose else {}),
    )
    store = StateStore(config, on_event=_print_event if args.trace else None)
    asyncio.run(_run(store))
    return 0


if __name__ == "__main__":
    sys.exit(main())
