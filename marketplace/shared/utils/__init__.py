# 📄 File: marketplace/shared/utils/__init__.py

# 🧭 Purpose (Layman Explanation):
# A collection of helpful tools the rest of the marketplace uses for logging, checking input
# and small calculations like reference numbers and money rounding.

# 🧪 Purpose (Technical Summary):
# Initializes the utilities package and re-exports the most commonly used helpers.

# 🔗 Dependencies:
# - logging.py: Structured logging utilities
# - validators.py: Contact and business identifier validation
# - helpers.py: General purpose helper functions

# 🔄 Connected Modules / Calls From:
# Used by: All marketplace modules

"""
Shared Utilities Package

- Structured logging with JSON formatting
- Contact, address and tax identifier validation
- Reference numbers, slugs, UTC time and money rounding
"""

from .helpers import (
    generate_reference_number,
    generate_slug,
    percentage_of,
    round_money,
    sum_money,
    utc_now,
)
from .logging import log_context, setup_logging

__all__ = [
    "generate_reference_number",
    "generate_slug",
    "log_context",
    "percentage_of",
    "round_money",
    "setup_logging",
    "sum_money",
    "utc_now",
]
