"""Reviews app package: ratings left by guests after a completed stay."""
