"""Infrastructure layer: logging and upstream API adapters."""
