"""
Poem Viewer - Configuration
Paths, display constants, and logging switches
"""

import os
from pathlib import Path
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

# =============================================================================
# PATHS
# =============================================================================
PROJECT_ROOT = Path(__file__).parent
LOGS_DIR = PROJECT_ROOT / "logs"
DIAGNOSTIC_LOG_PATH = LOGS_DIR / "diagnostic.log"

# Poems live next to the application, in the project root's poems/ folder.
# POEMS_DIR in the environment (or --poems-dir on the command line) overrides it.
POEMS_DIR = Path(os.getenv("POEMS_DIR", str(PROJECT_ROOT / "poems")))

# =============================================================================
# VERSION
# =============================================================================
VERSION = "0.1.0"
PROJECT_NAME = "Poem Viewer"

# =============================================================================
# DOCUMENT LOADING
# =============================================================================
DOCUMENT_EXTENSION = ".txt"  # Case-sensitive, ".TXT" files are ignored

# =============================================================================
# DISPLAY
# =============================================================================
BODY_STYLE = "green"            # Poem text
CHROME_STYLE = "bright_black"   # Footer rules, help hint, status line
FOOTER_RULE = "=" * 39
HELP_HINT = " ← → Switch poems | Q to quit"
EMPTY_MESSAGE = "No poems found in ./poems directory"

# =============================================================================
# LOGGING CONFIGURATION
# =============================================================================
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_TO_FILE = os.getenv("LOG_TO_FILE", "true").lower() == "true"
LOG_TO_CONSOLE = True  # Suspended automatically while the viewer owns the screen
