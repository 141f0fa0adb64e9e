# generate_synthetic_orders.py
"""
Generates a large CSV file with random e-commerce orders for testing data-intensive applications.
Usage (from terminal): python generate_synthetic_orders.py [--out PATH] [--rows N] [--seed S]

Without --out or --rows, the defaults come from SYNTHETIC_ORDERS_CSV and
SYNTHETIC_ORDERS_COUNT, read from the environment or a .env file, and fall back
to synthetic_orders.csv and 100,000 rows.
"""
import argparse
import csv
import operator
import os
import random
from dotenv import load_dotenv

from simulate_orders import CSV_COLUMNS, generate_orders, make_faker, order_to_row

DEFAULT_OUTPUT_CSV = "synthetic_orders.csv"
DEFAULT_NUM_RECORDS = 1_000_000
STANDALONE_NUM_RECORDS = 100_000


def generate_synthetic_ecommerce_data(output_csv=DEFAULT_OUTPUT_CSV, num_records=DEFAULT_NUM_RECORDS,
                                      rng=None, today=None):
    """
    Stream `num_records` synthetic orders to `output_csv`, header first.

    The file is overwritten if it exists. Errors opening it propagate to the caller.
    The completion notice is printed only once the file has been closed, and the
    number of rows written is returned.
    """
    try:
        if isinstance(num_records, bool):
            raise TypeError
        num_records = operator.index(num_records)
    except TypeError:
        raise ValueError(f"num_records must be an integer, got {num_records!r}")
    if num_records < 0:
        raise ValueError(f"num_records must be non-negative, got {num_records}")

    fake = make_faker(rng)

    with open(output_csv, "w", encoding="utf-8", newline="") as f:
        writer = csv.writer(f, lineterminator="\n")
        writer.writerow(CSV_COLUMNS)
        for order in generate_orders(num_records, fake=fake, today=today):
            writer.writerow(order_to_row(order))

    print(f"✅ Successfully generated {num_records} synthetic records in '{output_csv}'.")
    return num_records


def non_negative_int(value):
    try:
        count = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid row count: {value!r}")
    if count < 0:
        raise argparse.ArgumentTypeError(f"row count must be >= 0, got {count}")
    return count


def main(argv=None):
    load_dotenv()

    p = argparse.ArgumentParser(description="Generate a CSV of synthetic e-commerce orders.")
    p.add_argument("--out", default=os.getenv("SYNTHETIC_ORDERS_CSV", DEFAULT_OUTPUT_CSV),
                   help="Output CSV path (overwritten if it exists)")
    p.add_argument("--rows", type=non_negative_int,
                   default=os.getenv("SYNTHETIC_ORDERS_COUNT", str(STANDALONE_NUM_RECORDS)),
                   help="Number of order rows to generate")
    p.add_argument("--seed", type=int, default=None, help="Random seed for reproducible output")
    args = p.parse_args(argv)

    rng = random.Random(args.seed) if args.seed is not None else None

    print(f"📦 Generating {args.rows:,} synthetic orders...")
    generate_synthetic_ecommerce_data(args.out, args.rows, rng=rng)


if __name__ == "__main__":
    main()
