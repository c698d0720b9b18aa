"""Domain rules independent of HTTP and storage."""
