"""
Type tables and fixed module boilerplate
"""

# Prefix of the exported native symbol the linker must resolve
SYMBOL_PREFIX = "__c_"

DEFAULT_OUTPUT_DIR = "./lib"

# Scalar Haskell FFI types accepted by the default type-token parser
HS_TYPE_TABLE = {
    "Int": "Int",
    "Int8": "Int8",
    "Int16": "Int16",
    "Int32": "Int32",
    "Int64": "Int64",
    "Word": "Word",
    "Word8": "Word8",
    "Word16": "Word16",
    "Word32": "Word32",
    "Word64": "Word64",
    "Float": "Float",
    "Double": "Double",
    "Bool": "Bool",
    "Char": "Char",
    "CChar": "CChar",
    "CSChar": "CSChar",
    "CUChar": "CUChar",
    "CShort": "CShort",
    "CUShort": "CUShort",
    "CInt": "CInt",
    "CUInt": "CUInt",
    "CLong": "CLong",
    "CULong": "CULong",
    "CLLong": "CLLong",
    "CULLong": "CULLong",
    "CSize": "CSize",
    "CFloat": "CFloat",
    "CDouble": "CDouble",
    "CBool": "CBool",
    "CString": "CString",
}

# Type constructors taking exactly one argument
HS_TYPE_CONSTRUCTORS = ("IO", "Ptr")

UNIT_TYPE = "()"

GENERATED_NOTICE = """\
-- This file was generated by `hsbind` and contains C FFI bindings
-- wrappers for every native function exported with a Haskell signature"""

PRAGMAS = """\
{-# LANGUAGE ForeignFunctionInterface #-}

-- Why not rather using `{-# LANGUAGE CApiFFI #-}` language extension?
--
-- * Because it's GHC specific and not part of the Haskell standard:
--   https://ghc.gitlab.haskell.org/ghc/doc/users_guide/exts/ffi.html ;
--
-- * Because the capabilities it gives (it works on top of the symbols of a C
--   header file) can't work in our case, the exported symbols come from a
--   compiled library with no header.

{-# OPTIONS_GHC -Wno-unused-imports #-}"""

IMPORTS = """\
import Data.Int
import Data.Word
import Foreign.C.String
import Foreign.C.Types
import Foreign.Ptr"""
