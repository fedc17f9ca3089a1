"""Listings app package.

Properties offered for nightly rental, their search filters and the
listing API.
"""
