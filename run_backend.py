#!/usr/bin/env python
"""Script to run the Task Tracker backend server."""
import sys
from pathlib import Path

# Make the package importable when run from a checkout
sys.path.insert(0, str(Path(__file__).resolve().parent))

import uvicorn

from tasktracker.config import HOST, PORT, RELOAD

if __name__ == "__main__":
    uvicorn.run(
        "tasktracker.main:app",
        host=HOST,
        port=PORT,
        reload=RELOAD
    )
