"""Makes the svgscene package importable when running pytest from a checkout."""
