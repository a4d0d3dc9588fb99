"""Infrastructure layer: host adapters and configuration loading."""
