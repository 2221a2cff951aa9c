import os
from dotenv import load_dotenv

load_dotenv()

class Config:
    """Leaderboard configuration settings"""
    
    # Database settings
    DATABASE_URL = os.getenv('DATABASE_URL', 'sqlite:///trainerboard.db')
    
    # Runtime settings
    DEBUG = os.getenv('DEBUG', 'False').lower() == 'true'
    LOG_DIR = os.getenv('LOG_DIR', 'logs')
    
    # Display settings
    DEFAULT_DISPLAY_LIMIT = int(os.getenv('LEADERBOARD_DISPLAY_LIMIT', 10))
    EXPORT_TOP_N = int(os.getenv('LEADERBOARD_EXPORT_TOP_N', 10))
    
    # Cache settings
    CACHE_TTL = int(os.getenv('LEADERBOARD_CACHE_TTL', 180))  # 3 minutes
    CACHE_MAX_SIZE = int(os.getenv('LEADERBOARD_CACHE_MAX_SIZE', 500))
    
    @classmethod
    def validate(cls):
        """Validate that configured limits are usable"""
        if cls.DEFAULT_DISPLAY_LIMIT < 1:
            raise ValueError("LEADERBOARD_DISPLAY_LIMIT must be a positive integer")
        if cls.EXPORT_TOP_N < 1:
            raise ValueError("LEADERBOARD_EXPORT_TOP_N must be a positive integer")
