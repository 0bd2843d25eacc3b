"""Pincode query services."""
