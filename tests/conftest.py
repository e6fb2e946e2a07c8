# Test configuration
import os
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).parent.parent

# Add repo root to path so tests can import modules
sys.path.insert(0, str(REPO_ROOT))

# Pin settings before bfhl.config caches them
os.environ["OFFICIAL_EMAIL"] = "tester@example.com"
os.environ["GEMINI_API_KEY"] = ""
os.environ["LOG_LEVEL"] = "WARNING"
