"""
Delivery Cost Calculator
========================

Interactive CLI tool to calculate the expected delivery cost for a single shipment.

Run with: python -m delivery.scripts.calculator
"""

import polars as pl

from delivery.calculate_costs import calculate_costs
from delivery.data import MIN_DELIVERY_PRICE
from delivery.enums import CargoFragility, CargoSize, Distance, DeliveryServiceWorkload
from delivery.exceptions import DeliveryForbidden
from delivery.version import VERSION


DISTANCE_LABELS = {
    Distance.OVER_30_KM: "Over 30 km",
    Distance.LESS_30_KM: "10 - 30 km",
    Distance.LESS_10_KM: "2 - 10 km",
    Distance.LESS_2_KM: "Under 2 km",
}

CARGO_SIZE_LABELS = {
    CargoSize.LARGE: "Large",
    CargoSize.SMALL: "Small",
}

CARGO_FRAGILITY_LABELS = {
    CargoFragility.FRAGILE: "Fragile",
    CargoFragility.NOT_FRAGILE: "Not fragile",
}

WORKLOAD_LABELS = {
    DeliveryServiceWorkload.VERY_HIGH: "Very high",
    DeliveryServiceWorkload.HIGH: "High",
    DeliveryServiceWorkload.INCREASED: "Increased",
    DeliveryServiceWorkload.REGULAR: "Regular",
    DeliveryServiceWorkload.LOW: "Low",
}


def choose(title: str, labels: dict):
    """Prompt for one option from a numbered list."""
    options = list(labels)

    print(f"\n{title}:")
    for i, option in enumerate(options, start=1):
        print(f"  {i}. {labels[option]}")

    choice = input(f"Select (1-{len(options)}): ").strip()
    if not choice.isdigit() or not 1 <= int(choice) <= len(options):
        raise ValueError(f"Invalid selection '{choice}' for {title.lower()}")

    return options[int(choice) - 1]


def get_user_input() -> dict:
    """Prompt user for shipment details."""
    print("\n=== Delivery Cost Calculator ===")
    print(f"Version: {VERSION}")

    return {
        "distance": choose("Distance", DISTANCE_LABELS),
        "cargo_size": choose("Cargo size", CARGO_SIZE_LABELS),
        "cargo_fragility": choose("Fragility", CARGO_FRAGILITY_LABELS),
        "workload": choose("Delivery service workload", WORKLOAD_LABELS),
    }


def create_shipment_df(shipment: dict) -> pl.DataFrame:
    """Create a single-row DataFrame from user input."""
    return pl.DataFrame([{
        "distance": shipment["distance"].value,
        "cargo_size": shipment["cargo_size"].value,
        "cargo_fragility": shipment["cargo_fragility"].value,
        "workload": shipment["workload"].value,
    }])


def print_results(df: pl.DataFrame, shipment: dict) -> None:
    """Print calculation results."""
    row = df.row(0, named=True)

    print("\n" + "=" * 50)
    print("CALCULATION RESULTS")
    print("=" * 50)

    # Input summary
    print(f"\nDistance:  {DISTANCE_LABELS[shipment['distance']]}")
    print(f"Cargo:     {CARGO_SIZE_LABELS[shipment['cargo_size']]}, "
          f"{CARGO_FRAGILITY_LABELS[shipment['cargo_fragility']].lower()}")
    print(f"Workload:  {WORKLOAD_LABELS[shipment['workload']]}")

    # Cost breakdown
    print("\n--- Cost Breakdown ---")
    print(f"Distance:           {row['cost_distance']:>9.2f}")
    print(f"Cargo size:         {row['cost_size']:>9.2f}")
    if row['cost_fragility'] > 0:
        print(f"Fragile handling:   {row['cost_fragility']:>9.2f}")

    print(f"                    {'-' * 9}")
    print(f"Subtotal:           {row['cost_subtotal']:>9.2f}")
    print(f"Workload x{row['workload_coefficient']:<4.1f}     {row['cost_adjusted']:>9.2f}")
    if row['uses_min_price']:
        print(f"Minimum price:      {MIN_DELIVERY_PRICE:>9.2f}")
    print(f"                    {'=' * 9}")
    print(f"TOTAL:              {row['cost_total']:>9.2f}")
    print()


def main():
    """Main entry point."""
    try:
        shipment = get_user_input()
        df = create_shipment_df(shipment)

        try:
            df = calculate_costs(df)
        except DeliveryForbidden as e:
            print(f"\n{e}")
            return

        print_results(df, shipment)

    except KeyboardInterrupt:
        print("\n\nCancelled.")
    except Exception as e:
        print(f"\nError: {e}")
        raise


if __name__ == "__main__":
    main()
