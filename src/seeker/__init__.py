"""Seeker: metadata registry and search backend for canister discovery."""

__version__ = "0.1.0"
