"""Shared helpers for the Hex Monte Carlo package."""
