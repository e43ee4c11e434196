"""Infrastructure services shared by the pipeline packages."""
