"""Basic usage example for sortedlinkmap."""

from sortedlinkmap import OrderedMap


def main() -> None:
    """Demonstrate basic map operations."""
    prices = OrderedMap()

    print("=== Insert / Update / Erase ===\n")

    for symbol, price in [("MSFT", 415.2), ("AAPL", 189.5), ("GOOG", 142.7)]:
        print(f"insert({symbol!r}, {price}) -> {prices.insert(symbol, price)}")

    # Duplicate keys are refused, the first value stays
    print(f"insert('AAPL', 1.0) -> {prices.insert('AAPL', 1.0)}")
    print(f"update('AAPL', 191.0) -> {prices.update('AAPL', 191.0)}")
    print(f"update('TSLA', 250.0) -> {prices.update('TSLA', 250.0)}")
    print(f"insert_or_update('TSLA', 250.0) -> {prices.insert_or_update('TSLA', 250.0)}")
    print(f"erase('GOOG') -> {prices.erase('GOOG')}\n")

    print(f"Size: {prices.size()}")
    print(f"AAPL: {prices.get('AAPL')}")
    print(f"GOOG: {prices.get('GOOG')}\n")

    print("=== Walk by rank ===\n")
    for rank in range(prices.size()):
        key, value = prices.get_at(rank)
        print(f"  {rank}: {key} = {value}")


if __name__ == "__main__":
    main()
