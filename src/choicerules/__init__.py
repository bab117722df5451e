"""Conditional choice rules: hide or disable prompt options from inline markup."""

__version__ = "2.1.1"
