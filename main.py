"""
Query Repair API Server
Usage:
    python main.py [--host HOST] [--port PORT] [--debug]
"""

import argparse
import logging
from QueryRepair.Routes.SearchRoute import CreateApp

logger = logging.getLogger(__name__)

app = CreateApp()


def main():
    parser = argparse.ArgumentParser(description="Did-you-mean and external service API")
    parser.add_argument('--host', default='0.0.0.0', help='Host to bind to (default: 0.0.0.0)')
    parser.add_argument('--port', type=int, default=5000, help='Port to listen on (default: 5000)')
    parser.add_argument('--debug', action='store_true', help='Enable the Flask debugger and reloader')
    args = parser.parse_args()

    logger.info("Query repair API listening on http://%s:%d (debug=%s)", args.host, args.port, args.debug)
    app.run(host=args.host, port=args.port, debug=args.debug, use_reloader=args.debug)


if __name__ == '__main__':
    main()
