#!/usr/bin/env python3
"""Configuration validation script."""

import sys
from pathlib import Path

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from updown_app.config.loader import ConfigLoader
from updown_app.config.validation import ConfigValidator, ValidationError
from updown_app.errors import ConfigurationError


def validate_market_config(loader: ConfigLoader, market_id: str) -> list[ValidationError]:
    """Validate configuration for a specific market."""
    config = loader.merge_config(market_id)
    return ConfigValidator.validate_config(config)


def main():
    """Main validation function."""
    print("🔍 Validating UpDown App configuration...")

    loader = ConfigLoader.create()

    try:
        market_ids = loader.list_markets()
    except ConfigurationError as e:
        print(f"❌ Could not read market configuration: {e}")
        sys.exit(1)

    market_ids.append("UNKNOWN-MARKET")  # Should use defaults

    all_valid = True

    for market_id in market_ids:
        print(f"\n📊 Validating {market_id}...")

        try:
            errors = validate_market_config(loader, market_id)
        except ConfigurationError as e:
            print(f"❌ {e}")
            all_valid = False
            continue

        if errors:
            print(f"❌ Found {len(errors)} validation errors:")
            for error in errors:
                print(f"  • {error.field}: {error.message} (value: {error.value})")
            all_valid = False
        else:
            print(f"✅ {market_id} configuration is valid")

    if all_valid:
        print("\n🎉 All configuration validation passed!")
        sys.exit(0)
    else:
        print("\n❌ Configuration validation failed!")
        sys.exit(1)


if __name__ == "__main__":
    main()
