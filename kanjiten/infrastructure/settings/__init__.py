"""Settings bounded context - Infrastructure layer."""
