"""Vulture whitelist for false positives.

Names here are used by pydantic through decorators or class attributes,
which static analysis cannot see.
"""
# pylint: disable=all
# Pydantic field validator (beesolver/core/config.py)
_.blank_to_none  # noqa: F821

# Pydantic model validator (beesolver/core/config.py)
_.validate_puzzle  # noqa: F821
