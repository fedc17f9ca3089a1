"""Framework integration shared across apps."""
