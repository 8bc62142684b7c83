"""Data access and slider resolution for the catalog."""
