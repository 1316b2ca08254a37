#!/usr/bin/env python3
"""Register a legal case from the command line.

Usage:
    python scripts/register_case.py --user-id U-1 --token $TOKEN \
        --court-id CRT1 --description "Theft case" --case-type Criminal \
        --petitioner State --respondent "J. Doe" --start-date 2024-01-01 \
        --status Open

Exit codes:
    0: Case registered
    1: Validation or backend failure
    2: Caller may not register cases
"""

import sys

from case_registry.cli import main

if __name__ == "__main__":
    sys.exit(main())
