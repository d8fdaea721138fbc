"""Domain entities for the product catalog."""
