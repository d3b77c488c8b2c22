"""Run the API with ``python -m lifetracker``."""

from lifetracker.main import run

run()
