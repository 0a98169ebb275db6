# recut/core/logging_config.py
import logging
import os
from datetime import datetime
from typing import Optional, Dict, Any

class LoggingManager:
    """Centralized logging configuration for recut"""

    DEFAULT_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    DEFAULT_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'

    @staticmethod
    def configure(
        verbose: bool = False,
        log_file: Optional[str] = None,
        component: str = "recut",
        log_dir: Optional[str] = None,
        config: Optional[Dict[str, Any]] = None,
        level: Optional[int] = None
    ) -> logging.Logger:
        """Configure logging for the application

        Args:
            verbose: Enable debug logging if True
            log_file: Specific log file path (overrides automatic naming)
            component: Component name for logger and automatic log file naming
            log_dir: Directory for log files
            config: Configuration dictionary that may contain logging settings
            level: Explicit log level, overrides verbose and the configured level

        Returns:
            Configured logger instance
        """
        logging_config = (config or {}).get('logging', {})

        if level is not None:
            log_level = level
        elif verbose:
            log_level = logging.DEBUG
        else:
            log_level = getattr(logging, str(logging_config.get('level', 'INFO')).upper(), logging.INFO)

        handlers = [logging.StreamHandler()]

        log_dir = log_dir or logging_config.get('log_dir')
        if log_file or log_dir:
            if not log_file:
                # Auto-generate log filename based on component and timestamp
                timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
                os.makedirs(log_dir, exist_ok=True)
                log_file = os.path.join(log_dir, f"{component}_{timestamp}.log")

            file_handler = logging.FileHandler(log_file)
            file_handler.setFormatter(logging.Formatter(LoggingManager.DEFAULT_FORMAT))
            handlers.append(file_handler)

        log_format = logging_config.get('format', LoggingManager.DEFAULT_FORMAT)

        # Configure root logger
        logging.basicConfig(
            level=log_level,
            format=log_format,
            datefmt=LoggingManager.DEFAULT_DATE_FORMAT,
            handlers=handlers,
            force=True
        )

        logger = logging.getLogger(component)

        logger.info(f"Logging initialized for {component} at level {logging.getLevelName(log_level)}")
        if log_file:
            logger.info(f"Log file: {log_file}")

        return logger

    @staticmethod
    def get_logger(name: str) -> logging.Logger:
        """Get a named logger with the configured settings

        Args:
            name: Logger name, typically module.class format

        Returns:
            Logger instance
        """
        return logging.getLogger(name)
