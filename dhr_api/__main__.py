#!/usr/bin/env python

import argparse
import logging

import uvicorn


def main():
    parser = argparse.ArgumentParser(prog="dhr-api", description="Runs the DHR API server")
    parser.add_argument("--host", default="0.0.0.0", help="Interface to bind to")
    parser.add_argument("--port", type=int, default=8000, help="Port to listen on")
    parser.add_argument("--reload", action="store_true", help="Restart on code changes (development only)")

    args = parser.parse_args()
    logging.getLogger(__name__).info("Starting DHR API on %s:%d", args.host, args.port)
    uvicorn.run("dhr_api.main:app", host=args.host, port=args.port, reload=args.reload)


if __name__ == "__main__":
    main()
