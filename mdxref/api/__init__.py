"""mdxref API: corpus loading, link extraction, graph building and checking."""
