"""Tick derivation and window projection."""
