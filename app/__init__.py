"""Qt shell: configuration, logging, scheduling and the debug window."""
