#!/usr/bin/env python3
"""
ABOUTME: Entry point for the env-var-parser CLI
ABOUTME: Simple wrapper that imports and runs the modular CLI
"""

from env_var_parser.cli import main

if __name__ == "__main__":
    main()
