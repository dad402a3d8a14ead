"""Infrastructure layer - file exporters."""
