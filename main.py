# main.py
"""
Entry point: serves the placeholder web app on 127.0.0.1:3000
"""

from gh_api_service.server import run

if __name__ == "__main__":
    run()
