"""Cross-cutting helpers: logging and HTTP client factory."""
