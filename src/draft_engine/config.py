from pathlib import Path

# Base project directory
PROJECT_ROOT = Path(__file__).parent.parent.parent

# Log output
LOGS_DIR = PROJECT_ROOT / "logs"
LOG_FILE_NAME = "draft_engine.log"
LOG_MAX_BYTES = 5 * 1024 * 1024
LOG_BACKUP_COUNT = 3

# Default league settings
DEFAULT_DRAFT_TYPE = "snake"
DEFAULT_TEAM_SIZE = 15  # 11 starters + 4 substitutes
