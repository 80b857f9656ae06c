"""Example conversion script - prints a small conversion table"""

# !/usr/bin/env python3

from unit_converter import UnitConverter, setup_logging


def main():
    """Print every unit of each category converted from one default unit"""

    # Setup logging
    setup_logging('conversion.log', overwrite=True)

    converter = UnitConverter()

    for category in converter.list_categories():
        source = converter.units_for(category)[0]
        print(f"{category}: 1 {source} =")
        for target in converter.units_for(category)[1:]:
            print(f"    {converter.convert(category, '1', source, target)} {target}")


if __name__ == "__main__":
    main()
