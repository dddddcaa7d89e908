#!/usr/bin/env python3
"""Run the quest API server."""

import os

import uvicorn


def main():
    host = os.environ.get('QUEST_HOST', '0.0.0.0')
    port = int(os.environ.get('QUEST_PORT', '8000'))
    print("Starting Quest API server...")
    print(f"API documentation available at: http://localhost:{port}/docs")
    if os.environ.get('QUEST_WORDS_DIR'):
        print(f"Word lists from {os.environ['QUEST_WORDS_DIR']}")
    uvicorn.run(
        "server.app:app",
        host=host,
        port=port,
        reload=True
    )


if __name__ == "__main__":
    main()
