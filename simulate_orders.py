# simulate_orders.py
from datetime import date, timedelta
from faker import Faker

from catalog import PRODUCTS, COUNTRIES, cities_for

default_fake = Faker()

CSV_COLUMNS = [
    "order_id",
    "order_date",
    "user_id",
    "product_id",
    "quantity",
    "price",
    "total_amount",
    "country",
    "city",
]

LOOKBACK_DAYS = 365


def make_faker(rng=None):
    """Build a Faker instance, optionally driven by a caller-supplied random.Random."""
    faker = Faker()
    if rng is not None:
        faker.random = rng
    return faker


def generate_order(fake=None, today=None):
    fake = fake or default_fake
    rng = fake.random
    today = today or date.today()

    product = rng.choice(PRODUCTS)
    country = rng.choice(COUNTRIES)

    order = {
        "order_id": fake.uuid4(),
        "order_date": (today - timedelta(days=rng.randint(1, LOOKBACK_DAYS))).isoformat(),
        "user_id": rng.randint(100_000, 999_999),
        "product_id": product.product_id,
        "quantity": rng.randint(1, 5),
        "price": round(product.base_price * rng.uniform(0.9, 1.1), 2),  # +/- 10%
        "country": country,
        "city": rng.choice(cities_for(country)),
    }
    order["total_amount"] = round(order["price"] * order["quantity"], 2)
    return order


def generate_orders(num_records, fake=None, today=None):
    """Yield `num_records` independent orders without holding them in memory."""
    if num_records < 0:
        raise ValueError(f"num_records must be non-negative, got {num_records}")
    fake = fake or default_fake
    today = today or date.today()
    for _ in range(num_records):
        yield generate_order(fake, today)


def order_to_row(order):
    return [order[column] for column in CSV_COLUMNS]


if __name__ == "__main__":
    print(",".join(CSV_COLUMNS))
    print(",".join(str(value) for value in order_to_row(generate_order())))
