#!/usr/bin/env python3
"""Development server runner for Wall Squares."""

import logging

import uvicorn

if __name__ == "__main__":
    logging.basicConfig(
        level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )
    uvicorn.run(
        "boxes.server.main:app",
        host="127.0.0.1",
        port=9000,
        reload=True,  # Auto-reload on code changes
        log_level="info",
    )
