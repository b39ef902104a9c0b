"""HTTP handlers for the admin email tools."""
