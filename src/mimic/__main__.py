# topmark:header:start
#
#   project      : Mimic
#   file         : __main__.py
#   file_relpath : src/mimic/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running Mimic via ``python -m mimic``.

It delegates directly to :func:`mimic.cli.main.cli`, so module execution and
the ``mimic`` console script share a single entry point.

Examples:
    Parse a service definition::

        python -m mimic parse service.mimic
"""

from __future__ import annotations

from mimic.cli.main import cli

if __name__ == "__main__":
    # We call the Click group directly
    cli()
