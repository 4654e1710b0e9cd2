#!/usr/bin/env python3
"""
Demo: validating a service settings payload.

This demonstrates:
- Combining catalog conditions into AND-groups and OR-alternatives
- Container conditions (array_of, object_of)
- A custom condition with a computed expected fragment
- Reading the expected / actual messages of a failed check
"""

import json

from runtime_typecheck import Condition, Fragment, TypeCheckError, assert_and_raise, check
from runtime_typecheck import Cond
from runtime_typecheck.utils import setup_logging


even = Condition(
    predicate=lambda value: value % 2 == 0,
    should_be=Fragment(after=["that is even"]),
    is_="an odd number",
    conditions=[Cond.integer],
    name="even",
)

DESCRIPTORS = {
    "name": [[Cond.nonempty, Cond.string]],
    "replicas": [[Cond.positive, Cond.integer, even]],
    "ports": [Cond.array_of([[Cond.integer, Cond.in_range(1, 65535)]])],
    "mode": [Cond.keywords("fast", "safe"), Cond.null],
    "labels": [Cond.object_of("string", [Cond.string])],
}


def report(settings):
    print(json.dumps(settings, indent=2))
    failures = 0
    for field, descriptor in DESCRIPTORS.items():
        try:
            assert_and_raise(settings.get(field), descriptor)
            print(f"  ✓ {field}")
        except TypeCheckError as e:
            failures += 1
            print(f"  ✗ {field}: {e}")
    print(f"\n{failures} invalid field(s)\n")


def main():
    setup_logging()

    print("=" * 60)
    print("Runtime Typecheck Demo: Service Settings")
    print("=" * 60)

    print("\n[1] Quick boolean checks")
    print(f"  check(4, replicas)   -> {check(4, DESCRIPTORS['replicas'])}")
    print(f"  check(3, replicas)   -> {check(3, DESCRIPTORS['replicas'])}")
    print(f"  check(None, mode)    -> {check(None, DESCRIPTORS['mode'])}")

    print("\n[2] A valid payload")
    report({
        "name": "billing",
        "replicas": 4,
        "ports": [80, 443],
        "mode": "safe",
        "labels": {"team": "payments"},
    })

    print("[3] An invalid payload")
    report({
        "name": "",
        "replicas": 3,
        "ports": [80, 70000],
        "mode": "slow",
        "labels": {"team": "payments", "tier": 1},
    })


if __name__ == "__main__":
    main()
