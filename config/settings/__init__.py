"""Settings for ETNAir.

``base`` holds what every environment shares; ``dev``, ``prod`` and
``test`` override it. Select one with ``DJANGO_SETTINGS_MODULE``.
"""
