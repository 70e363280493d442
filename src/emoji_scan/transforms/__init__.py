"""Apache Beam transforms annotating text records with emoji occurrences."""
