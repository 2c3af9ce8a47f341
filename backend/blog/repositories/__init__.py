"""Data-access repositories, one per table."""
