"""Top-level package for the stop graph project.

This package turns a GTFS stop registry into an RDF-style graph of
geolocated stops and extracts the subgraph of the stops lying inside a
geographic rectangle.
"""

__version__ = "0.1.0"
