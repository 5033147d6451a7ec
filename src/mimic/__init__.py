# topmark:header:start
#
#   project      : Mimic
#   file         : __init__.py
#   file_relpath : src/mimic/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Mimic package.

Mimic is the definition-parsing core of a service virtualization tool. It turns
line-oriented virtual service definitions into settings objects and converts
ordered, multi-valued header collections to and from their JSON wire form.
"""

from __future__ import annotations
