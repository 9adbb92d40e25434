"""Combining maps with merge() and reassign()."""

from sortedlinkmap import OrderedMap, merge, reassign


def main() -> None:
    """Demonstrate merge conflict policies and reassign."""
    team_a = OrderedMap({"alice": 3.5, "bob": 2.0, "carol": 4.0})
    team_b = OrderedMap({"bob": 2.0, "carol": 4.5, "dave": 1.0})

    print("=== merge ===\n")
    for policy in ("omit", "first", "second"):
        result = OrderedMap()
        ok = merge(team_a, team_b, result, policy=policy)
        print(f"policy={policy!r:9} ok={ok!s:5} -> {result}")

    print("\n=== reassign ===\n")
    shuffled = OrderedMap()
    reassign(team_a, shuffled)
    print(f"source: {team_a}")
    print(f"result: {shuffled}")


if __name__ == "__main__":
    main()
