"""Bounded contexts of the VITAE engine."""
