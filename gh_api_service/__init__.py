"""
GitHub API service: a repository metadata client and a placeholder web server
"""

__version__ = "0.1.0"
