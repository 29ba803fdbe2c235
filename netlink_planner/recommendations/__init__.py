"""Transmission medium recommendation engine."""
