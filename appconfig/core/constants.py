"""
Application-wide constants.
"""

# ========================================
# API URLs
# ========================================

DEFAULT_API_URL = "https://api.example.com"
"""Value every fresh config record starts with."""

DEMO_API_URL = "https://api.new-example.com"
"""Value the demo program writes before reading it back."""
