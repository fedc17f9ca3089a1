"""Bookings app package.

This app encapsulates the booking domain: the booking model, the
availability engine and the lifecycle services. Writes on one listing are
serialised by a per-listing lock, and PostgreSQL additionally enforces
non-overlapping active stays with an exclusion constraint.
"""
