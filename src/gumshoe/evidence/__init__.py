"""Evidence metadata, custody ledger and planting."""
