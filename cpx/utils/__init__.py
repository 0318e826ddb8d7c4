"""Shared utility functions for cpx."""

from cpx.utils.error_utils import create_file_error


__all__ = ["create_file_error"]
