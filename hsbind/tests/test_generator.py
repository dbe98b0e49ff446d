"""
Tests for Haskell module rendering
"""

from hsbind import parse_signatures, render_module
from hsbind.core.config import PRAGMAS, IMPORTS
from hsbind.generators.haskell import foreign_import


def test_single_binding():
    """Test a module with one function"""
    source = render_module("Math", parse_signatures(["add :: Int -> Int -> Int"]))

    assert "module Math (add) where" in source
    assert 'foreign import ccall unsafe "__c_add" add :: Int -> Int -> Int' in source


def test_zero_argument_binding():
    """Test that a single type renders without arrows"""
    source = render_module("Unit", parse_signatures(["noop :: ()"]))
    line = source.splitlines()[-1]
    assert line == 'foreign import ccall unsafe "__c_noop" noop :: ()'
    assert "->" not in line


def test_export_order_follows_input():
    """Test the export list and import block keep caller order"""
    source = render_module("M", parse_signatures(["f :: CInt -> CDouble", "g :: Word8"]))
    lines = source.splitlines()

    assert "module M (f, g) where" in lines
    imports = [l for l in lines if l.startswith("foreign import")]
    assert imports == [
        'foreign import ccall unsafe "__c_f" f :: CInt -> CDouble',
        'foreign import ccall unsafe "__c_g" g :: Word8',
    ]


def test_permutation_is_not_reordered():
    """Test that permuting signatures permutes the output identically"""
    sigs = parse_signatures(["zeta :: Int", "alpha :: Bool", "mid :: IO ()"])
    forward = render_module("M", sigs)
    backward = render_module("M", list(reversed(sigs)))

    assert "module M (zeta, alpha, mid) where" in forward
    assert "module M (mid, alpha, zeta) where" in backward

    forward_imports = [l for l in forward.splitlines() if l.startswith("foreign")]
    backward_imports = [l for l in backward.splitlines() if l.startswith("foreign")]
    assert forward_imports == list(reversed(backward_imports))


def test_duplicates_are_kept():
    """Test that the renderer does not deduplicate names"""
    sigs = parse_signatures(["f :: Int", "f :: Int"])
    source = render_module("Dup", sigs)
    assert "module Dup (f, f) where" in source
    assert source.count('foreign import ccall unsafe "__c_f" f :: Int') == 2


def test_rendering_is_deterministic():
    """Test identical arguments give identical output"""
    sigs = parse_signatures(["a :: Ptr CChar -> IO CInt", "b :: CString -> IO ()"])
    assert render_module("Det", sigs) == render_module("Det", sigs)


def test_section_order():
    """Test the notice, pragmas, header, imports and bindings order"""
    source = render_module("Order", parse_signatures(["f :: Int"]))

    assert source.startswith("-- This file was generated by `hsbind`")
    pragma_at = source.index(PRAGMAS)
    header_at = source.index("module Order (f) where")
    imports_at = source.index(IMPORTS)
    binding_at = source.index("foreign import ccall unsafe")
    assert pragma_at < header_at < imports_at < binding_at


def test_fixed_boilerplate():
    """Test the pragma and import lines required by the FFI"""
    source = render_module("Boiler", [])
    assert "{-# LANGUAGE ForeignFunctionInterface #-}" in source
    assert "{-# OPTIONS_GHC -Wno-unused-imports #-}" in source
    for module in ["Data.Int", "Data.Word", "Foreign.C.String", "Foreign.C.Types", "Foreign.Ptr"]:
        assert f"import {module}\n" in source


def test_foreign_import_shape():
    """Test the symbol prefix and the Haskell-visible name"""
    sig = parse_signatures(["hello :: CString -> IO ()"])[0]
    assert foreign_import(sig) == 'foreign import ccall unsafe "__c_hello" hello :: CString -> IO ()'
