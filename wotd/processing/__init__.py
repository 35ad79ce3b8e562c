"""Pipeline orchestration."""

from wotd.processing.pipeline import run_pipeline

__all__ = ["run_pipeline"]
