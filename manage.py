#!/usr/bin/env python
"""
Command-line entry point for the carelink backend.

Besides Django's own commands this exposes the clinic ones:
``populate_data`` (demo records) and ``ensure_callers`` (API tokens).
"""
import os
import sys


def main() -> None:
    os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'carelink.settings')
    try:
        from django.core.management import execute_from_command_line  # type: ignore
    except ImportError as exc:
        raise ImportError(
            "Couldn't import Django. Is it installed in the active virtual "
            "environment (pip install -e .)?"
        ) from exc
    execute_from_command_line(sys.argv)


if __name__ == '__main__':
    main()
