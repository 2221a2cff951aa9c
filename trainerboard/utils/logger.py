import logging
import sys
from datetime import datetime
from pathlib import Path

from trainerboard.config import Config

FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'

def setup_logger(name: str, file_prefix: str = 'trainerboard') -> logging.Logger:
    """
    Setup a logger with consistent formatting.
    
    Console output always; a dated log file under Config.LOG_DIR unless
    LOG_DIR is set to an empty string.
    """
    
    logger = logging.getLogger(name)
    
    if logger.handlers:
        return logger
    
    log_level = logging.DEBUG if Config.DEBUG else logging.INFO
    logger.setLevel(log_level)
    formatter = logging.Formatter(FORMAT, datefmt=DATE_FORMAT)
    
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)
    
    if Config.LOG_DIR:
        log_dir = Path(Config.LOG_DIR)
        log_dir.mkdir(parents=True, exist_ok=True)
        
        file_handler = logging.FileHandler(
            log_dir / f'{file_prefix}_{datetime.now().strftime("%Y%m%d")}.log',
            encoding='utf-8'
        )
        # Files keep debug detail even when the console does not
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)
    
    return logger
