"""Value types shared across the pipeline."""
