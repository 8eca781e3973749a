#!/usr/bin/env python3
"""Validate fortune.yaml in a config directory (default: current directory)."""

import sys
from pathlib import Path

from daily_fortune.config.loader import CONFIG_FILENAME, ConfigLoader
from daily_fortune.config.validation import ConfigValidator
from daily_fortune.errors import ConfigurationError


def main() -> None:
    config_dir = Path(sys.argv[1]) if len(sys.argv) > 1 else Path.cwd()
    config_file = config_dir / CONFIG_FILENAME
    print(f"🔍 Validating {config_file}...")

    if not config_file.exists():
        print("ℹ️  No config file found, defaults will be used")

    loader = ConfigLoader.create(config_dir)
    try:
        config = loader.merge_config()
    except ConfigurationError as e:
        print(f"❌ {e}")
        sys.exit(1)

    errors = ConfigValidator.validate_config(config)
    if errors:
        print(f"❌ Found {len(errors)} validation errors:")
        for error in errors:
            print(f"  • {error.field}: {error.message} (value: {error.value})")
        sys.exit(1)

    print("✅ Configuration is valid")
    for section, values in config.items():
        print(f"  [{section}]")
        for key, value in values.items():
            print(f"    {key} = {value!r}")


if __name__ == "__main__":
    main()
