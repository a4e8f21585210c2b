"""HTTP types: immutable request, query parameters and response."""
