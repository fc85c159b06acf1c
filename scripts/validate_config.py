#!/usr/bin/env python3
"""Configuration validation script."""

import sys
from pathlib import Path

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from sss_app.config.loader import ConfigLoader
from sss_app.config.validation import ConfigValidator
from sss_app.errors import InstrumentDefinitionError
from sss_app.market import build_instruments


def main():
    """Main validation function."""
    config_dir = Path(sys.argv[1]) if len(sys.argv) > 1 else None
    loader = ConfigLoader.create(config_dir)

    print(f"🔍 Validating market configuration in {loader.config_dir}...")

    all_valid = True

    config = loader.merge_config()
    errors = ConfigValidator.validate_config(config)
    if errors:
        print(f"❌ Found {len(errors)} validation errors:")
        for error in errors:
            print(f"  • {error.field}: {error.message} (value: {error.value})")
        all_valid = False
    else:
        print("✅ market.yaml overrides are valid")
        for section, values in config.items():
            print(f"  {section}: {values}")

    print("\n📊 Validating instrument seed list...")
    try:
        instruments = build_instruments(loader.defaults.instruments)
        symbols = [instrument.symbol for instrument in instruments]
        if len(set(symbols)) != len(symbols):
            print(f"❌ Duplicate symbols in seed list: {symbols}")
            all_valid = False
        else:
            print(f"✅ {len(instruments)} instruments: {', '.join(symbols)}")
    except InstrumentDefinitionError as e:
        print(f"❌ Invalid instrument {e.symbol}: {e}")
        all_valid = False

    if all_valid:
        print("\n🎉 All configuration validation passed!")
        sys.exit(0)
    else:
        print("\n❌ Configuration validation failed!")
        sys.exit(1)


if __name__ == "__main__":
    main()
