#!/usr/bin/env python3
"""
Policy Cache command-line demo

Builds a cache and replays a sequence of operations against it, printing
the result of each one.

Operations:
    put:KEY=VALUE   store a value
    get:KEY         read a value
    policy:KIND     switch eviction policy (lru, lfu, fifo)
    evict           evict one entry
    stats           print cache statistics

Usage:
    policy-cache --policy lru --capacity 2 put:a=1 put:b=2 get:a put:c=3 get:b
    policy-cache demo
"""

import argparse
import logging
import sys
from typing import Any, Dict, List, Optional

from .caching import PolicyCache
from .config import Settings, load_settings
from .exceptions import CacheError, InvalidConfiguration
from .models.cache import PolicyKind
from .policies import resolve_kind

logger = logging.getLogger(__name__)

DEMO_OPERATIONS = ["put:a=1", "put:b=2", "get:a", "put:c=3", "get:b", "stats"]
LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def _format_value(value) -> str:
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="replace")
    return str(value)


def policy_options(kind: str, tie_break: str) -> Dict[str, Any]:
    """
    Options for building a policy of the given kind.

    Raises:
        InvalidConfiguration: If kind is not a known policy
    """
    if resolve_kind(kind) is PolicyKind.LFU:
        return {"tie_break": tie_break}
    return {}


def apply_operation(cache: PolicyCache, operation: str, lfu_tie_break: str = "insertion") -> str:
    """
    Apply one operation string to the cache.

    Args:
        cache: Target cache
        operation: Operation in CLI syntax (see module docstring)
        lfu_tie_break: Tie-break used when switching to LFU

    Returns:
        Line describing the outcome

    Raises:
        ValueError: If the operation cannot be parsed
    """
    name, _, arg = operation.partition(":")
    name = name.lower().strip()

    if name == "put":
        key, sep, value = arg.partition("=")
        if not sep:
            raise ValueError(f"put expects KEY=VALUE, got {arg!r}")
        before = set(cache.keys())
        cache.put(key, value)
        evicted = sorted(before - set(cache.keys()))
        line = f"put {key}={value}"
        if evicted:
            line += f" (evicted {', '.join(evicted)})"
        return line

    if name == "get":
        value, found = cache.get(arg)
        if found:
            return f"get {arg} -> {_format_value(value)}"
        return f"get {arg} -> (not found)"

    if name == "policy":
        cache.set_policy(arg, **policy_options(arg, lfu_tie_break))
        return f"policy -> {cache.policy_kind.value}"

    if name == "evict":
        return f"evicted {cache.evict()}"

    if name == "stats":
        stats = cache.get_stats()
        return (
            f"stats size={stats.size}/{stats.max_size} policy={stats.policy} "
            f"hits={stats.hits} misses={stats.misses} evictions={stats.evictions} "
            f"hit_rate={stats.hit_rate:.2%} order={cache.eviction_order()}"
        )

    raise ValueError(f"Unknown operation: {operation!r}")


def build_parser(settings: Settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="policy-cache",
        description="Replay cache operations against a bounded cache"
    )
    parser.add_argument(
        "--policy",
        default=settings.default_policy.value,
        help=f"Eviction policy: {', '.join(k.value for k in PolicyKind)} (default: {settings.default_policy.value})"
    )
    parser.add_argument(
        "--capacity",
        type=int,
        default=settings.max_capacity,
        help=f"Maximum number of entries (default: {settings.max_capacity})"
    )
    parser.add_argument(
        "--tie-break",
        choices=["insertion", "recency"],
        default=settings.lfu_tie_break,
        help="LFU tie-break between keys with equal counts"
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=settings.log_level,
        help="Logging level"
    )
    parser.add_argument(
        "operations",
        nargs="*",
        help="Operations to replay, or 'demo' for the built-in scenario"
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    try:
        settings = load_settings()
    except InvalidConfiguration as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    args = build_parser(settings).parse_args(argv)

    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s - [%(name)s] - %(levelname)s - %(message)s"
    )

    operations = args.operations
    if operations == ["demo"]:
        operations = DEMO_OPERATIONS

    try:
        options = policy_options(args.policy, args.tie_break)
        cache = PolicyCache(args.policy, args.capacity, **options)
    except InvalidConfiguration as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    print(f"{settings.app_name} {settings.app_version}: {cache!r}")

    for operation in operations:
        try:
            print(apply_operation(cache, operation, lfu_tie_break=args.tie_break))
        except InvalidConfiguration as e:
            print(f"error: {e}", file=sys.stderr)
            return 2
        except (ValueError, TypeError) as e:
            print(f"error: {e}", file=sys.stderr)
            return 1
        except CacheError:
            logger.exception(f"Cache failure while applying {operation!r}")
            return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
