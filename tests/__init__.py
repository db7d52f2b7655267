"""Test suite package marker."""

import pytest

# Ensure shared helpers are assertion-rewritten before import.
pytest.register_assert_rewrite("tests.assertions")
