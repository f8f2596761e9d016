import os
import logging

# Ensure logs directory exists
os.makedirs("logs", exist_ok=True)

def setup_logging():
    """Configure centralized logging for the application"""
    level = getattr(logging, os.getenv("LOG_LEVEL", "INFO").upper(), logging.INFO)
    formatter = logging.Formatter("%(asctime)s - [%(levelname)s] - %(name)s - %(message)s")

    file_handler = logging.FileHandler("logs/sondeos.log", encoding="utf-8")
    file_handler.setFormatter(formatter)
    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)

    logging.basicConfig(level=level, handlers=[file_handler, console_handler])
