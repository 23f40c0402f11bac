# engine/cli.py
from __future__ import annotations
import argparse
import json
import sys
import time
from typing import Dict, List, Optional, Sequence

from .config import StoreConfig
from .errors import StoreError
from .store import RecordStore
from .types import PageResult


def print_table(rows: List[List[str]], elapsed: float = 0.0, footer: Optional[str] = None) -> None:
    if not rows:
        print(f"Empty set ({elapsed:.2f} sec)")
        return

    ncols = max(len(r) for r in rows)
    widths = [0] * ncols
    for r in rows:
        for i, v in enumerate(r):
            widths[i] = max(widths[i], len(v))

    def line():
        return "+" + "+".join("-" * (w + 2) for w in widths) + "+"

    print(line())
    for r in rows:
        cells = list(r) + [""] * (ncols - len(r))
        print("| " + " | ".join(cells[i].ljust(widths[i]) for i in range(ncols)) + " |")
    print(line())
    print(footer or f"{len(rows)} rows ({elapsed:.2f} sec)")


def print_page(res: PageResult, as_json: bool, elapsed: float) -> None:
    if as_json:
        print(json.dumps(res.to_dict(), ensure_ascii=False))
        return
    print_table(
        res.data,
        elapsed,
        footer=f"{len(res.data)} rows (page {res.current_page}/{res.total_pages}, "
               f"total {res.total_records}, {elapsed:.2f} sec)",
    )


def ok(msg: str, elapsed: float = 0.0) -> None:
    print(f"{msg} ({elapsed:.2f} sec)")


def parse_pairs(items: Optional[Sequence[str]], opt: str) -> Dict[str, str]:
    """['col=value', ...] -> {'col': 'value'}; the value may itself contain '='.

    A repeated column would overwrite the earlier value, so it is rejected.
    """
    out: Dict[str, str] = {}
    for item in items or []:
        col, sep, value = item.partition("=")
        if not sep or not col:
            raise argparse.ArgumentTypeError(f"{opt} expects col=value, got {item!r}")
        if col in out:
            raise argparse.ArgumentTypeError(f"{opt} repeats column {col!r}")
        out[col] = value
    return out


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="mini_csvdb", description="Flat-file CSV table store")
    ap.add_argument("--data", default="data", help="table directory (default: data)")
    ap.add_argument("--log-file", default=None, help="also write reported errors to this file")
    ap.add_argument("--log-level", default="INFO", help="logging level (default: INFO)")
    sub = ap.add_subparsers(dest="command", required=True)

    p = sub.add_parser("create", help="create a table with a header row")
    p.add_argument("table")
    p.add_argument("columns", nargs="*")

    p = sub.add_parser("insert", help="append a record")
    p.add_argument("table")
    p.add_argument("values", nargs="+")

    p = sub.add_parser("get", help="fetch the first record whose field 0 equals id")
    p.add_argument("table")
    p.add_argument("id")

    p = sub.add_parser("all", help="list one page of raw lines")
    p.add_argument("table")
    p.add_argument("--page", type=int, default=1)
    p.add_argument("--per-page", type=int, default=10)
    p.add_argument("--json", action="store_true")

    p = sub.add_parser("update", help="replace every record whose field 0 equals id")
    p.add_argument("table")
    p.add_argument("id")
    p.add_argument("values", nargs="+")

    p = sub.add_parser("delete", help="remove every record whose field 0 equals id")
    p.add_argument("table")
    p.add_argument("id")

    p = sub.add_parser("filter", help="records containing every --where value, optionally ordered")
    p.add_argument("table")
    p.add_argument("--where", action="append", metavar="COL=VALUE")
    p.add_argument("--order-by", default=None, metavar="COL=VALUE")
    p.add_argument("--page", type=int, default=1)
    p.add_argument("--per-page", type=int, default=10)
    p.add_argument("--json", action="store_true")
    return ap


def run(store: RecordStore, args: argparse.Namespace) -> int:
    t0 = time.perf_counter()
    cmd = args.command
    if cmd == "create":
        store.create_table(args.table, args.columns)
        ok(f"Table {args.table} created", time.perf_counter() - t0)
    elif cmd == "insert":
        store.insert_record(args.table, args.values)
        ok("Query OK, 1 row inserted", time.perf_counter() - t0)
    elif cmd == "get":
        rec = store.get_record_by_id(args.table, args.id)
        print_table([rec] if rec is not None else [], time.perf_counter() - t0)
    elif cmd == "all":
        res = store.get_all_records(args.table, args.page, args.per_page)
        print_page(res, args.json, time.perf_counter() - t0)
    elif cmd == "update":
        store.update_record(args.table, args.id, args.values)
        ok("Query OK", time.perf_counter() - t0)
    elif cmd == "delete":
        store.delete_record(args.table, args.id)
        ok("Query OK", time.perf_counter() - t0)
    elif cmd == "filter":
        conditions = parse_pairs(args.where, "--where")
        order_by = parse_pairs([args.order_by], "--order-by") if args.order_by else None
        res = store.filter_records(args.table, conditions, args.page, args.per_page, order_by)
        print_page(res, args.json, time.perf_counter() - t0)
    return 0


def main(argv=None) -> int:
    ap = build_parser()
    args = ap.parse_args(argv)
    cfg = StoreConfig.from_args(args)
    try:
        store = cfg.build_store()
        return run(store, args)
    except (StoreError, OSError, ValueError, argparse.ArgumentTypeError) as e:
        print(f"error {type(e).__name__}: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
