"""Running both mate pipelines and joining their results."""
