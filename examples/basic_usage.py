"""Basic usage example for Argument Checker."""

import logging
from uuid import UUID, uuid4

from argument_checker import ArgumentError, ArgumentNoneError, CheckerSettings, check_that


class Order:
    """Order whose constructor guards its inputs."""

    def __init__(self, order_id: UUID, customer: str, items: list[str], quantity: int):
        self.order_id = check_that(order_id, "order_id").is_not_none().is_not_default_value().value
        self.customer = check_that(customer, "customer").is_not_none_or_whitespace().value
        self.items = check_that(items, "items").is_not_none().is_not_empty().value
        self.quantity = check_that(quantity, "quantity").is_greater_than(0).is_less_than(100).value


def main():
    """Demonstrate passing and failing argument checks."""
    logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    order = Order(uuid4(), "Ada", ["keyboard"], 2)
    print(f"✅ Created order {order.order_id} for {order.customer}")

    bad_inputs = [
        (UUID(int=0), "Ada", ["keyboard"], 2),
        (uuid4(), "   ", ["keyboard"], 2),
        (uuid4(), None, ["keyboard"], 2),
        (uuid4(), "Ada", [], 2),
        (uuid4(), "Ada", ["keyboard"], 0),
    ]
    for args in bad_inputs:
        try:
            Order(*args)
        except ArgumentNoneError as exc:
            print(f"❌ missing argument: {exc}")
        except ArgumentError as exc:
            print(f"❌ invalid argument ({exc.violation.check}): {exc}")

    # Strict mode refuses checks that do not apply to the value's type
    strict = CheckerSettings(strict_capabilities=True)
    try:
        check_that(42, "answer", settings=strict).is_not_empty()
    except ArgumentError as exc:
        print(f"❌ {type(exc).__name__}: {exc}")


if __name__ == "__main__":
    main()
