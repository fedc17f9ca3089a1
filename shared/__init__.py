"""
Shared Kernel

Value objects, the domain error taxonomy and request-layer glue shared by
every app of the marketplace.
"""
