"""
-------
conftest.py
-------
Shared pytest fixtures for funnel tests.
"""

import pytest
import matplotlib
matplotlib.use("Agg")  # headless backend for CI

from funnel.config import ChartConfig


# -----------------------------------------------------------------------------
# Configurations
# -----------------------------------------------------------------------------
@pytest.fixture
def straight_config() -> ChartConfig:
  """300x200 straight funnel narrowing to a 150 px bottom."""
  return ChartConfig(width=300, height=200, bottom_width=150)


@pytest.fixture
def curved_config() -> ChartConfig:
  """Default-sized curved funnel."""
  return ChartConfig(is_curved=True)


@pytest.fixture
def pinched_config() -> ChartConfig:
  """Straight funnel whose last two sections have vertical sides."""
  return ChartConfig(width=400, height=400, bottom_width=100, bottom_pinch=2)


# -----------------------------------------------------------------------------
# Data
# -----------------------------------------------------------------------------
@pytest.fixture
def rows():
  return [
      ("Applicants", 2000),
      ("Pre-screened", 1200),
      ("Interviewed", 500),
      ("Hired", 120),
  ]


# -----------------------------------------------------------------------------
# Matplotlib fixtures
# -----------------------------------------------------------------------------
@pytest.fixture(scope="function")
def fig_ax():
  """
  Create and yield an isolated Matplotlib Figure/Axes pair.

  The figure is automatically closed after the test to avoid memory leaks.
  """
  import matplotlib.pyplot as plt
  fig, ax = plt.subplots(figsize=(4, 3))
  yield fig, ax
  plt.close(fig)
