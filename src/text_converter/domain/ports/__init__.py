"""Ports implemented by the infrastructure layer."""
