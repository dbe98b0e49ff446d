#!/usr/bin/env python3
"""
hsbind FastAPI Server
Provides a REST API for signature parsing and binding module generation
"""
import logging
import os
from typing import List, Optional

from fastapi import FastAPI
from pydantic import BaseModel

from hsbind import __version__
from hsbind.core.errors import SignatureError
from hsbind.core.pipeline import generate
from hsbind.parser import parse_signature

logger = logging.getLogger(__name__)


# ============================================================================
# Request/Response Models
# ============================================================================

class ParseSignatureRequest(BaseModel):
    signature: str


class ParseSignatureResponse(BaseModel):
    success: bool
    name: Optional[str] = None
    types: List[str] = []
    error: Optional[str] = None
    kind: Optional[str] = None


class GenerateModuleRequest(BaseModel):
    module_name: str
    signatures: List[str]
    skip_invalid: bool = False


class SkippedSignature(BaseModel):
    signature: str
    error: str


class GenerateModuleResponse(BaseModel):
    success: bool
    source: Optional[str] = None
    exports: List[str] = []
    errors: List[SkippedSignature] = []
    error: Optional[str] = None


class HealthResponse(BaseModel):
    status: str
    version: str


# ============================================================================
# FastAPI App
# ============================================================================

app = FastAPI(
    title="hsbind API",
    description="Haskell FFI binding generation from type signatures",
    version=__version__
)


# ============================================================================
# Endpoints
# ============================================================================

@app.get("/", response_model=HealthResponse)
async def health():
    """Health check endpoint"""
    return {"status": "ok", "version": __version__}


@app.post("/api/parse-signature", response_model=ParseSignatureResponse)
async def parse_signature_endpoint(request: ParseSignatureRequest):
    """
    Parse one signature line.

    Example:
        POST /api/parse-signature
        {"signature": "add :: Int -> Int -> Int"}
    """
    try:
        sig = parse_signature(request.signature)
    except SignatureError as e:
        return {"success": False, "error": str(e), "kind": type(e).__name__}

    return {
        "success": True,
        "name": sig.name,
        "types": [str(t) for t in sig.types]
    }


@app.post("/api/generate-module", response_model=GenerateModuleResponse)
async def generate_module(request: GenerateModuleRequest):
    """
    Generate a Haskell binding module.

    Example:
        POST /api/generate-module
        {
            "module_name": "Math",
            "signatures": ["add :: Int -> Int -> Int"],
            "skip_invalid": false
        }
    """
    try:
        result = generate(
            request.module_name,
            request.signatures,
            skip_invalid=request.skip_invalid
        )
    except SignatureError as e:
        logger.info("Module %s rejected: %s", request.module_name, e)
        return {"success": False, "error": str(e)}

    return {
        "success": True,
        "source": result["source"],
        "exports": [sig.name for sig in result["signatures"]],
        "errors": [
            {"signature": line, "error": message}
            for line, message in result["errors"]
        ]
    }


# ============================================================================
# Run Server
# ============================================================================

if __name__ == "__main__":
    import uvicorn

    host = os.getenv("HSBIND_HOST", "0.0.0.0")
    port = int(os.getenv("HSBIND_PORT", "8000"))

    logging.basicConfig(level=logging.INFO)

    print("=" * 60)
    print("hsbind API Server")
    print("=" * 60)
    print(f"Starting server on http://{host}:{port}")
    print(f"API docs: http://{host}:{port}/docs")
    print("=" * 60)

    uvicorn.run(app, host=host, port=port)
