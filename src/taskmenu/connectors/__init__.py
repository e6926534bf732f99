"""Console connector (the interactive menu loop)."""
