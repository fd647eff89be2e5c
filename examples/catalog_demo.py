"""Demonstration script for element catalog lookups and queries."""
import logging

from pyptable import Block, Phase, default_catalog, get_dataset_info, get_supported_fields, is_found


def setup_logging():
    """Setup logging configuration."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s -> %(message)s"
    )


def demonstrate_catalog():
    """Demonstrate element lookups, filters and export."""
    setup_logging()
    info = get_dataset_info()
    print(f"\n{'=' * 80}")
    print(f"DATASET: {info['name']} (version {info['version']})")
    print(f"{'=' * 80}")
    print(f"Source: {info['source']}")
    print(f"Records: {info['total_records']}, atomic numbers {info['atomic_number_range']}")
    print(f"Blocks: {info['blocks']}")
    print(f"Phases: {info['phases']}")
    catalog = default_catalog()
    for key in ('Fe', 'He', 'Xx'):
        element = catalog.by_symbol(key)
        print(f"\n{'=' * 80}")
        if not is_found(element):
            print(f"LOOKUP '{key}': {element}")
            continue
        print(f"ELEMENT: {element}")
        print(f"{'=' * 80}")
        for field in get_supported_fields():
            value = getattr(element, field)
            print(f"{field:<20}: {'unknown' if value is None else value}")
    print(f"\n{'=' * 80}")
    print("QUERIES")
    print(f"{'=' * 80}")
    print(f"Liquids at standard conditions: {catalog.filter(phase=Phase.LIQUID).symbols()}")
    print(f"Period 4 d-block: {catalog.filter(block=Block.D, period=4).symbols()}")
    print(f"Melting below 303 K: {catalog.filter(melting_point=(None, 303.0), phase='solid').symbols()}")
    electronegative = catalog.filter(lambda e: e.has_electronegativity and e.electronegativity > 3.0)
    print(f"Electronegativity above 3.0: {electronegative.symbols()}")
    df = catalog.filter(group=18).to_dataframe()
    print(f"\n{df[['symbol', 'name', 'boiling_point', 'phase']]}")


if __name__ == "__main__":
    demonstrate_catalog()
