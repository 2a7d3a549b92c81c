"""
Centralized logging configuration for MedSky.

Sets up application logging and structured audit files in the logs/ directory:
- Literature lookups (query, result count, outcome)
- Generated case studies
"""

import logging
from pathlib import Path
from datetime import datetime
from typing import Optional
import json

from medsky.core.config_helper import config

logger = logging.getLogger(__name__)

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(level: Optional[str] = None) -> None:
    """Configure root logging for the application process."""
    logging.basicConfig(
        level=getattr(logging, (level or config.LOG_LEVEL).upper(), logging.INFO),
        format=LOG_FORMAT
    )


class MedSkyLogger:
    """Centralized logger for MedSky with structured file output."""

    def __init__(self, logs_dir: Optional[Path] = None):
        """
        Initialize the logger.

        Args:
            logs_dir: Directory for log files (defaults to config.LOGS_DIR)
        """
        self.logs_dir = Path(logs_dir or config.LOGS_DIR)
        self._setup_directories()
        self._setup_loggers()

    def _setup_directories(self):
        """Create logging directories if they don't exist."""
        self.logs_dir.mkdir(parents=True, exist_ok=True)
        (self.logs_dir / "lookups").mkdir(exist_ok=True)
        (self.logs_dir / "cases").mkdir(exist_ok=True)

    def _setup_loggers(self):
        """Set up file loggers for each audit stream."""
        self.debug_logger = self._create_file_logger(
            'medsky.debug',
            self.logs_dir / 'debug.log'
        )
        self.lookup_logger = self._create_file_logger(
            'medsky.lookups',
            self.logs_dir / 'lookups' / 'lookups.log'
        )

    def _create_file_logger(self, name: str, filepath: Path) -> logging.Logger:
        """Create a logger that writes to a specific file."""
        file_logger = logging.getLogger(name)
        file_logger.setLevel(logging.INFO)
        file_logger.propagate = False

        file_logger.handlers = []

        handler = logging.FileHandler(filepath)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        file_logger.addHandler(handler)

        return file_logger

    def _append_jsonl(self, path: Path, entry: dict) -> None:
        with open(path, 'a', encoding='utf-8') as f:
            f.write(json.dumps(entry, default=str) + '\n')

    def log_lookup(self, step: str, query: str, result_count: int, outcome: str):
        """
        Log one literature lookup.

        Args:
            step: Which resolver issued the lookup (condition, explanation)
            query: Search term sent to the literature service
            result_count: Number of identifiers returned
            outcome: Resolved value or the fallback used
        """
        self.lookup_logger.info(
            f"LOOKUP | step={step} | query={query!r} | results={result_count}"
        )
        self._append_jsonl(self.logs_dir / "lookups" / "lookups.jsonl", {
            "timestamp": datetime.now().isoformat(),
            "step": step,
            "query": query,
            "result_count": result_count,
            "outcome": outcome
        })

    def log_case_generated(self, case_study: dict, fallback: bool = False):
        """
        Log a generated case study.

        Args:
            case_study: Serialized case study
            fallback: Whether the fixed fallback record was returned
        """
        self.debug_logger.info(
            f"CASE_GENERATED | field={case_study.get('diseaseField')} | fallback={fallback}"
        )
        self._append_jsonl(self.logs_dir / "cases" / "generated.jsonl", {
            "timestamp": datetime.now().isoformat(),
            "fallback": fallback,
            "case_study": case_study
        })


# Global logger instance
_logger_instance = None


def get_logger() -> Optional[MedSkyLogger]:
    """Get the global audit logger, or None when file logging is off."""
    global _logger_instance
    if not config.FILE_LOGGING:
        return None
    if _logger_instance is None:
        _logger_instance = MedSkyLogger()
    return _logger_instance


def log_lookup(step: str, query: str, result_count: int, outcome: str):
    """Convenience function to log a literature lookup."""
    try:
        audit = get_logger()
        if audit is not None:
            audit.log_lookup(step, query, result_count, outcome)
    except OSError as e:
        logger.warning(f"Failed to write lookup log: {e}")


def log_case_generated(case_study: dict, fallback: bool = False):
    """Convenience function to log a generated case study."""
    try:
        audit = get_logger()
        if audit is not None:
            audit.log_case_generated(case_study, fallback)
    except OSError as e:
        logger.warning(f"Failed to write case log: {e}")
