"""
Constants and predefined values for the GLSL interface parser.

This module contains the keyword sets used throughout the parser, taken from
the GLSL ES 3.00 specification.
"""

# Storage qualifiers of shader interface variables
QUALIFIERS: frozenset[str] = frozenset({"in", "uniform", "out"})

# Qualifier given to struct definitions and their members
STRUCT_QUALIFIER = "struct"

# Sentinel types
BLOCK_TYPE = "block"  # Uniform block or struct body, members in `block`
STRUCT_TYPE = "struct"  # Instance of a user struct named in `struct_name`

PRECISIONS: frozenset[str] = frozenset({"highp", "mediump", "lowp"})

CENTROID = "centroid"
INVARIANT = "invariant"

# Built-in GLSL types a declaration can have
GLSL_TYPES: frozenset[str] = frozenset(
    {
        # Scalars
        "double",
        "float",
        "uint",
        "int",
        "bool",
        # Vectors
        "vec2",
        "vec3",
        "vec4",
        "dvec2",
        "dvec3",
        "dvec4",
        "uvec2",
        "uvec3",
        "uvec4",
        "ivec2",
        "ivec3",
        "ivec4",
        "bvec2",
        "bvec3",
        "bvec4",
        # Matrices
        "mat2",
        "mat3",
        "mat4",
        "mat2x2",
        "mat2x3",
        "mat2x4",
        "mat3x2",
        "mat3x3",
        "mat3x4",
        "mat4x2",
        "mat4x3",
        "mat4x4",
        # Samplers
        "sampler2D",
        "sampler3D",
        "samplerCube",
        "samplerCubeShadow",
        "sampler2DShadow",
        "sampler2DArray",
        "sampler2DArrayShadow",
        "isampler2D",
        "isampler3D",
        "isamplerCube",
        "isampler2DArray",
        "usampler2D",
        "usampler3D",
        "usamplerCube",
        "usampler2DArray",
    }
)

# Words that start an interface declaration expression
DECLARATION_KEYWORDS: frozenset[str] = QUALIFIERS
LAYOUT_KEYWORD = "layout"
PRECISION_KEYWORD = "precision"

# A `precision highp float` statement has exactly 3 words; longer expressions
# starting with `precision` are declarations carrying a precision modifier.
PRECISION_STATEMENT_LENGTH = 3

# Wire names of the record attributes, as consumed by binding generators
RECORD_KEYS: dict[str, str] = {
    "qualifier": "qualifier",
    "type": "type",
    "name": "name",
    "amount": "amount",
    "is_invariant": "isInvariant",
    "is_centroid": "isCentroid",
    "layout": "layout",
    "precision": "precision",
    "block": "block",
    "struct_name": "structName",
}
