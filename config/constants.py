"""
Centralized constants for PageFlow.
Runtime defaults shared by settings, logging and the CLI.
"""
import os

# ===========================================
# THEME
# ===========================================
DEFAULT_MAIN_COLOR = '#1e3a5f'        # navy
PRESET_MAIN_COLORS = [
    ('#1e3a5f', 'navy'),
    ('#166534', 'forest green'),
    ('#7c3aed', 'royal purple'),
    ('#0369a1', 'ocean blue'),
    ('#374151', 'charcoal'),
    ('#b45309', 'gold'),
    ('#0d9488', 'teal'),
    ('#4338ca', 'indigo'),
]

# ===========================================
# PAGE
# ===========================================
DEFAULT_PAGE_SIZE = 'A4'
DEFAULT_PREVIEW_WIDTH = 500           # on-screen page width the editor lays out against

# ===========================================
# FILE HANDLING
# ===========================================
OUTPUT_DIR = 'data/output'

# ===========================================
# LOGGING
# ===========================================
LOG_LEVEL = os.getenv('PAGEFLOW_LOG_LEVEL', 'INFO')
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_FILE = os.getenv('PAGEFLOW_LOG_FILE', 'logs/pageflow.log')   # empty disables file logging
LOG_MAX_SIZE_MB = 10
LOG_BACKUP_COUNT = 5
