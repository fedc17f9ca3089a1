"""Domain apps of the ETNAir marketplace."""
