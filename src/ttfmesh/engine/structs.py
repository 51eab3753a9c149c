"""ctypes mirrors of the ttf2mesh public structures.

Only what the handle layer reads is declared for ``ttf_t``: the struct is
always reached through a pointer handed out by the engine and never allocated
or sized on the Python side, so a leading-fields prefix is layout-compatible.
``ttf_glyph_t`` is declared in full because the glyph table is indexed as an
array, which depends on its size.
"""

import ctypes as ct


class Vertex2D(ct.Structure):
    _fields_ = [
        ("x", ct.c_float),
        ("y", ct.c_float),
    ]


class Vertex3D(ct.Structure):
    _fields_ = [
        ("x", ct.c_float),
        ("y", ct.c_float),
        ("z", ct.c_float),
    ]


class Face(ct.Structure):
    _fields_ = [
        ("v1", ct.c_int),
        ("v2", ct.c_int),
        ("v3", ct.c_int),
    ]


class Normal(ct.Structure):
    _fields_ = [
        ("x", ct.c_float),
        ("y", ct.c_float),
        ("z", ct.c_float),
    ]


class TTFGlyph(ct.Structure):
    "ttf_glyph_t"
    _fields_ = [
        ("index", ct.c_int),  # glyph index in font
        ("symbol", ct.c_int),  # utf-16 symbol
        ("npoints", ct.c_int),  # total points within all contours
        ("ncontours", ct.c_int),  # number of contours in outline
        ("composite", ct.c_uint32, 1),
        ("_reserved", ct.c_uint32, 31),
        ("xbounds", ct.c_float * 2),
        ("ybounds", ct.c_float * 2),
        ("advance", ct.c_float),
        ("lbearing", ct.c_float),
        ("rbearing", ct.c_float),
        ("outline", ct.c_void_p),  # ttf_outline_t *, or NULL
    ]


class TTFFile(ct.Structure):
    "initial public part of a ttf_t"
    _fields_ = [
        ("nchars", ct.c_int),
        ("nglyphs", ct.c_int),
        ("chars", ct.POINTER(ct.c_uint16)),
        ("char2glyph", ct.POINTER(ct.c_uint16)),
        ("glyphs", ct.POINTER(TTFGlyph)),
        ("filename", ct.c_char_p),
    ]


class TTFMesh(ct.Structure):
    "ttf_mesh_t"
    _fields_ = [
        ("nvert", ct.c_int),
        ("nfaces", ct.c_int),
        ("vert", ct.POINTER(Vertex2D)),
        ("faces", ct.POINTER(Face)),
        ("outline", ct.c_void_p),
    ]


class TTFMesh3D(ct.Structure):
    "ttf_mesh3d_t"
    _fields_ = [
        ("nvert", ct.c_int),
        ("nfaces", ct.c_int),
        ("vert", ct.POINTER(Vertex3D)),
        ("faces", ct.POINTER(Face)),
        ("normals", ct.POINTER(Normal)),
    ]


TTFFilePtr = ct.POINTER(TTFFile)
TTFGlyphPtr = ct.POINTER(TTFGlyph)
TTFMeshPtr = ct.POINTER(TTFMesh)
TTFMesh3DPtr = ct.POINTER(TTFMesh3D)
