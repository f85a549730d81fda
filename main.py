"""
Color Analysis MCP Server - FastAPI implementation
Provides endpoints for color analysis operations
"""

import logging
import os

from fastapi import FastAPI
import uvicorn
from fastapi_mcp import FastApiMCP

from routers import colorTools_router

HOST = os.getenv("COLOR_MCP_HOST", "0.0.0.0")
PORT = int(os.getenv("COLOR_MCP_PORT", "8973"))
LOG_LEVEL = os.getenv("COLOR_MCP_LOG_LEVEL", "INFO").upper()

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Color Analysis MCP Server",
    description="A FastAPI server that parses colors and reports conversions and accessibility metrics",
    version="1.0.0"
)

@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "healthy"}

app.include_router(colorTools_router)

if __name__ == "__main__":
    logging.basicConfig(
        level=LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    mcp = FastApiMCP(app, exclude_operations=[])
    mcp.mount_http()
    logger.info("starting color analysis server on %s:%d", HOST, PORT)
    uvicorn.run(app, host=HOST, port=PORT, log_level=LOG_LEVEL.lower())
