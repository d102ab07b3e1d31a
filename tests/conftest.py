"""
Pytest configuration for peano tests.

Registers Hypothesis profiles; select one with HYPOTHESIS_PROFILE
(default: "default").
"""

import os

from hypothesis import settings

# Unary construction is linear in value, so per-example timing varies
settings.register_profile(
    "default",
    print_blob=True,
    deadline=None,
)

settings.register_profile(
    "ci",
    print_blob=True,
    deadline=None,
    max_examples=200,
    derandomize=True,
)

settings.load_profile(os.environ.get("HYPOTHESIS_PROFILE", "default"))
