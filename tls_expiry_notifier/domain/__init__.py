"""Domain layer - Certificate expiry records and classification rules."""
