"""Adapters layer - Concrete implementations of ports.

This module contains implementations of the port interfaces,
connecting the graph core to external libraries:
- RDF encoders (rdflib)
- Rendering engines (Folium)
"""
