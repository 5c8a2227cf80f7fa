from __future__ import annotations

import logging
import operator
from dataclasses import dataclass

from lift import compose, do_all, equal, greater_equal, if_then, if_then_else, less_than, when_none

logging.basicConfig(level=logging.DEBUG)


@dataclass(frozen=True)
class Order:
    id: str
    total: float
    country: str


def total(order: Order) -> float:
    return order.total


def country(order: Order) -> str:
    return order.country


def main() -> None:
    orders = [
        Order("a-1", 12.5, "SE"),
        Order("a-2", 250.0, "US"),
        Order("a-3", -4.0, "SE"),
        Order("a-4", 99.0, "NO"),
    ]

    large = compose(greater_equal(100), total)
    domestic = compose(equal("SE"), country)
    suspicious = compose(less_than(0), total)

    by_total = compose(operator.lt, total)
    print("cheaper than a-1:", [o.id for o in orders if by_total(o, orders[0])])

    plain = when_none(large, suspicious)
    print("plain orders:", [o.id for o in orders if plain(o)])

    shipping = if_then_else(domestic, lambda _: "post", lambda o: f"courier to {o.country}")
    log_large = if_then(large, lambda o: print(f"large order {o.id}: {o.total}"))
    report = do_all(log_large, lambda o: print(f"{o.id} ships by {shipping(o)}"))

    for order in orders:
        report(order)

    print("domestic and valid:", [o.id for o in orders if (domestic & ~suspicious)(o)])


if __name__ == "__main__":
    main()
