"""Reserved vocabulary shared by the builder, the spatial view and encoders.

These terms must match existing consumers of the generated files exactly.
"""

from __future__ import annotations

from typing import Dict

from .models import XSD_DECIMAL, XSD_NS, IRI

EX_NS = "http://www.ejemplo.com/"
GEO_NS = "http://www.w3.org/2003/01/geo/wgs84_pos#"
RDF_NS = "http://www.w3.org/1999/02/22-rdf-syntax-ns#"
RDFS_NS = "http://www.w3.org/2000/01/rdf-schema#"

RDF_TYPE = IRI(RDF_NS + "type")
RDFS_LABEL = IRI(RDFS_NS + "label")
GEO_SPATIAL_THING = IRI(GEO_NS + "SpatialThing")
GEO_LAT = IRI(GEO_NS + "lat")
GEO_LONG = IRI(GEO_NS + "long")

DECIMAL_DATATYPE = XSD_DECIMAL
LABEL_LANGUAGE = "es"
UNNAMED_LABEL = "Sin nombre"

DEFAULT_PREFIXES: Dict[str, str] = {
    "ex": EX_NS,
    "geo": GEO_NS,
    "rdfs": RDFS_NS,
    "xsd": XSD_NS,
}
