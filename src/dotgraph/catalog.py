"""Attribute catalog: the Graphviz attribute vocabulary and lookup functions."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class UsageContext(str, Enum):
    NODE = "node"
    EDGE = "edge"
    GRAPH = "graph"
    CLUSTER = "cluster"


class GraphKind(str, Enum):
    GRAPH = "graph"
    DIGRAPH = "digraph"


class ValueType(str, Enum):
    """Graphviz attribute value types."""

    ADD_DOUBLE = "addDouble"
    ARROW_TYPE = "arrowType"
    ASPECT_TYPE = "aspectType"
    BOOL = "bool"
    CLUSTER_MODE = "clusterMode"
    COLOR = "color"
    COLOR_LIST = "colorList"
    DIR_TYPE = "dirType"
    DOUBLE = "double"
    ESC_STRING = "escString"
    INT = "int"
    LAYER_LIST = "layerList"
    LAYER_RANGE = "layerRange"
    LBL_STRING = "lblString"
    OUTPUT_MODE = "outputMode"
    PACK_MODE = "packMode"
    PAGEDIR = "pagedir"
    POINT = "point"
    POINTF = "pointf"
    POINTF_LIST = "pointfList"
    PORT_POS = "portPos"
    QUAD_TYPE = "quadType"
    RANK_TYPE = "rankType"
    RANKDIR = "rankdir"
    RECT = "rect"
    SHAPE = "shape"
    SMOOTH_TYPE = "smoothType"
    SPLINE_TYPE = "splineType"
    START_TYPE = "startType"
    STRING = "string"
    STYLE = "style"
    VIEWPORT = "viewPort"


# Values of these types are wrapped in double quotes when serialized.
QUOTED_TYPES: frozenset[ValueType] = frozenset(
    {
        ValueType.ESC_STRING,
        ValueType.RECT,
        ValueType.COLOR,
        ValueType.COLOR_LIST,
        ValueType.STRING,
        ValueType.LBL_STRING,
        ValueType.PORT_POS,
        ValueType.POINT,
        ValueType.POINTF,
        ValueType.POINTF_LIST,
        ValueType.SPLINE_TYPE,
        ValueType.STYLE,
        ValueType.VIEWPORT,
    }
)


@dataclass(frozen=True)
class AttributeInfo:
    """Metadata about a Graphviz attribute."""

    name: str
    contexts: frozenset[UsageContext]
    value_type: ValueType

    @property
    def quoted(self) -> bool:
        return self.value_type in QUOTED_TYPES

    def allows(self, context: UsageContext) -> bool:
        return context in self.contexts


_USAGE_CODES: dict[str, UsageContext] = {
    "E": UsageContext.EDGE,
    "N": UsageContext.NODE,
    "G": UsageContext.GRAPH,
    "C": UsageContext.CLUSTER,
}


def _entry(name: str, usage: str, value_type: ValueType) -> AttributeInfo:
    return AttributeInfo(
        name=name,
        contexts=frozenset(_USAGE_CODES[code] for code in usage),
        value_type=value_type,
    )


_T = ValueType

# Usage codes: E=edge, N=node, G=graph, C=cluster (subgraph-only attributes are filed under C)
ATTRIBUTES: tuple[AttributeInfo, ...] = (
    _entry("_background", "G", _T.STRING),
    _entry("area", "NC", _T.DOUBLE),
    _entry("arrowhead", "E", _T.ARROW_TYPE),
    _entry("arrowsize", "E", _T.DOUBLE),
    _entry("arrowtail", "E", _T.ARROW_TYPE),
    _entry("aspect", "G", _T.ASPECT_TYPE),
    _entry("bb", "GC", _T.RECT),
    _entry("beautify", "G", _T.BOOL),
    _entry("bgcolor", "GC", _T.COLOR_LIST),
    _entry("center", "G", _T.BOOL),
    _entry("charset", "G", _T.STRING),
    _entry("class", "ENGC", _T.STRING),
    _entry("cluster", "C", _T.BOOL),
    _entry("clusterrank", "G", _T.CLUSTER_MODE),
    _entry("color", "ENC", _T.COLOR_LIST),
    _entry("colorscheme", "ENGC", _T.STRING),
    _entry("comment", "ENG", _T.STRING),
    _entry("compound", "G", _T.BOOL),
    _entry("concentrate", "G", _T.BOOL),
    _entry("constraint", "E", _T.BOOL),
    _entry("Damping", "G", _T.DOUBLE),
    _entry("decorate", "E", _T.BOOL),
    _entry("defaultdist", "G", _T.DOUBLE),
    _entry("dim", "G", _T.INT),
    _entry("dimen", "G", _T.INT),
    _entry("dir", "E", _T.DIR_TYPE),
    _entry("diredgeconstraints", "G", _T.STRING),
    _entry("distortion", "N", _T.DOUBLE),
    _entry("dpi", "G", _T.DOUBLE),
    _entry("edgehref", "E", _T.ESC_STRING),
    _entry("edgetarget", "E", _T.ESC_STRING),
    _entry("edgetooltip", "E", _T.ESC_STRING),
    _entry("edgeURL", "E", _T.ESC_STRING),
    _entry("epsilon", "G", _T.DOUBLE),
    _entry("esep", "G", _T.ADD_DOUBLE),
    _entry("fillcolor", "NEC", _T.COLOR_LIST),
    _entry("fixedsize", "N", _T.BOOL),
    _entry("fontcolor", "ENGC", _T.COLOR),
    _entry("fontname", "ENGC", _T.STRING),
    _entry("fontnames", "G", _T.STRING),
    _entry("fontpath", "G", _T.STRING),
    _entry("fontsize", "ENGC", _T.DOUBLE),
    _entry("forcelabels", "G", _T.BOOL),
    _entry("gradientangle", "NGC", _T.INT),
    _entry("group", "N", _T.STRING),
    _entry("head_lp", "E", _T.POINT),
    _entry("headclip", "E", _T.BOOL),
    _entry("headhref", "E", _T.ESC_STRING),
    _entry("headlabel", "E", _T.LBL_STRING),
    _entry("headport", "E", _T.PORT_POS),
    _entry("headtarget", "E", _T.ESC_STRING),
    _entry("headtooltip", "E", _T.ESC_STRING),
    _entry("headURL", "E", _T.ESC_STRING),
    _entry("height", "N", _T.DOUBLE),
    _entry("href", "ENGC", _T.ESC_STRING),
    _entry("id", "ENGC", _T.ESC_STRING),
    _entry("image", "N", _T.STRING),
    _entry("imagepath", "G", _T.STRING),
    _entry("imagepos", "N", _T.STRING),
    _entry("imagescale", "N", _T.STRING),
    _entry("inputscale", "G", _T.DOUBLE),
    _entry("K", "GC", _T.DOUBLE),
    _entry("label", "ENGC", _T.LBL_STRING),
    _entry("label_scheme", "G", _T.INT),
    _entry("labelangle", "E", _T.DOUBLE),
    _entry("labeldistance", "E", _T.DOUBLE),
    _entry("labelfloat", "E", _T.BOOL),
    _entry("labelfontcolor", "E", _T.COLOR),
    _entry("labelfontname", "E", _T.STRING),
    _entry("labelfontsize", "E", _T.DOUBLE),
    _entry("labelhref", "E", _T.ESC_STRING),
    _entry("labeljust", "GC", _T.STRING),
    _entry("labelloc", "NGC", _T.STRING),
    _entry("labeltarget", "E", _T.ESC_STRING),
    _entry("labeltooltip", "E", _T.ESC_STRING),
    _entry("labelURL", "E", _T.ESC_STRING),
    _entry("landscape", "G", _T.BOOL),
    _entry("layer", "ENC", _T.LAYER_RANGE),
    _entry("layerlistsep", "G", _T.STRING),
    _entry("layers", "G", _T.LAYER_LIST),
    _entry("layerselect", "G", _T.LAYER_RANGE),
    _entry("layersep", "G", _T.STRING),
    _entry("layout", "G", _T.STRING),
    _entry("len", "E", _T.DOUBLE),
    _entry("levels", "G", _T.INT),
    _entry("levelsgap", "G", _T.DOUBLE),
    _entry("lhead", "E", _T.STRING),
    _entry("lheight", "GC", _T.DOUBLE),
    _entry("linelength", "G", _T.INT),
    _entry("lp", "EGC", _T.POINT),
    _entry("ltail", "E", _T.STRING),
    _entry("lwidth", "GC", _T.DOUBLE),
    _entry("margin", "NGC", _T.POINTF),
    _entry("maxiter", "G", _T.INT),
    _entry("mclimit", "G", _T.DOUBLE),
    _entry("mindist", "G", _T.DOUBLE),
    _entry("minlen", "E", _T.INT),
    _entry("mode", "G", _T.STRING),
    _entry("model", "G", _T.STRING),
    _entry("mosek", "G", _T.BOOL),
    _entry("newrank", "G", _T.BOOL),
    _entry("nodesep", "G", _T.DOUBLE),
    _entry("nojustify", "ENGC", _T.BOOL),
    _entry("normalize", "G", _T.BOOL),
    _entry("notranslate", "G", _T.BOOL),
    _entry("nslimit", "G", _T.DOUBLE),
    _entry("nslimit1", "G", _T.DOUBLE),
    _entry("oneblock", "G", _T.BOOL),
    _entry("ordering", "GN", _T.STRING),
    _entry("orientation", "GN", _T.STRING),
    _entry("outputorder", "G", _T.OUTPUT_MODE),
    _entry("overlap", "G", _T.STRING),
    _entry("overlap_scaling", "G", _T.DOUBLE),
    _entry("overlap_shrink", "G", _T.BOOL),
    _entry("pack", "G", _T.INT),
    _entry("packmode", "G", _T.PACK_MODE),
    _entry("pad", "G", _T.POINTF),
    _entry("page", "G", _T.POINTF),
    _entry("pagedir", "G", _T.PAGEDIR),
    _entry("pencolor", "C", _T.COLOR),
    _entry("penwidth", "ENC", _T.DOUBLE),
    _entry("peripheries", "NC", _T.INT),
    _entry("pin", "N", _T.BOOL),
    _entry("pos", "EN", _T.POINT),
    _entry("quadtree", "G", _T.QUAD_TYPE),
    _entry("quantum", "G", _T.DOUBLE),
    _entry("rank", "C", _T.RANK_TYPE),
    _entry("rankdir", "G", _T.RANKDIR),
    _entry("ranksep", "G", _T.DOUBLE),
    _entry("ratio", "G", _T.STRING),
    _entry("rects", "N", _T.RECT),
    _entry("regular", "N", _T.BOOL),
    _entry("remincross", "G", _T.BOOL),
    _entry("repulsiveforce", "G", _T.DOUBLE),
    _entry("resolution", "G", _T.DOUBLE),
    _entry("root", "GN", _T.STRING),
    _entry("rotate", "G", _T.INT),
    _entry("rotation", "G", _T.DOUBLE),
    _entry("samehead", "E", _T.STRING),
    _entry("sametail", "E", _T.STRING),
    _entry("samplepoints", "N", _T.INT),
    _entry("scale", "G", _T.DOUBLE),
    _entry("searchsize", "G", _T.INT),
    _entry("sep", "G", _T.ADD_DOUBLE),
    _entry("shape", "N", _T.SHAPE),
    _entry("shapefile", "N", _T.STRING),
    _entry("showboxes", "ENG", _T.INT),
    _entry("sides", "N", _T.INT),
    _entry("size", "G", _T.POINTF),
    _entry("skew", "N", _T.DOUBLE),
    _entry("smoothing", "G", _T.SMOOTH_TYPE),
    _entry("sortv", "GCN", _T.INT),
    _entry("splines", "G", _T.STRING),
    _entry("start", "G", _T.START_TYPE),
    _entry("style", "ENGC", _T.STYLE),
    _entry("stylesheet", "G", _T.STRING),
    _entry("tail_lp", "E", _T.POINTF),
    _entry("tailclip", "E", _T.BOOL),
    _entry("tailhref", "E", _T.ESC_STRING),
    _entry("taillabel", "E", _T.LBL_STRING),
    _entry("tailport", "E", _T.PORT_POS),
    _entry("tailtarget", "E", _T.ESC_STRING),
    _entry("tailtooltip", "E", _T.ESC_STRING),
    _entry("tailURL", "E", _T.ESC_STRING),
    _entry("target", "ENGC", _T.ESC_STRING),
    _entry("TBbalance", "G", _T.STRING),
    _entry("tooltip", "NEC", _T.ESC_STRING),
    _entry("truecolor", "G", _T.BOOL),
    _entry("URL", "ENGC", _T.ESC_STRING),
    _entry("vertices", "N", _T.POINTF_LIST),
    _entry("viewport", "G", _T.VIEWPORT),
    _entry("voro_margin", "G", _T.DOUBLE),
    _entry("weight", "E", _T.DOUBLE),
    _entry("width", "N", _T.DOUBLE),
    _entry("xdotversion", "G", _T.STRING),
    _entry("xlabel", "EN", _T.LBL_STRING),
    _entry("xlp", "EN", _T.POINT),
    _entry("z", "N", _T.DOUBLE),
)

# Build lookup index
_by_name: dict[str, AttributeInfo] = {a.name: a for a in ATTRIBUTES}


def get_attribute_info(name: str) -> AttributeInfo | None:
    """Look up an attribute by name. Returns None if not found."""
    return _by_name.get(name)


def list_attributes(
    *,
    context: UsageContext | None = None,
    value_type: ValueType | None = None,
) -> list[AttributeInfo]:
    """List attributes, optionally filtered by usage context and value type."""
    result: list[AttributeInfo] = list(ATTRIBUTES)
    if context is not None:
        result = [a for a in result if a.allows(context)]
    if value_type is not None:
        result = [a for a in result if a.value_type == value_type]
    return result
