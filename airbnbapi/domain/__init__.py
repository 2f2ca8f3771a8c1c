"""Domain layer: error contracts, protocols and value objects."""
