"""Domain building blocks shared across apps."""
