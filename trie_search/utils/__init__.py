"""Support code for the CLI and tools: logging, config, metrics, threads."""
