"""Infrastructure layer: template loading, filesystem output, project store."""
