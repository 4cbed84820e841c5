"""Route-rendering pipeline services."""
