"""Emoji annotation pipeline package."""
from .local_testing import run_local_pipeline, create_sample_lines

__all__ = ['run_local_pipeline', 'create_sample_lines']
