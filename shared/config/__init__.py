"""Shared configuration"""
from .settings import SERVICE_NAME, LOG_LEVEL
from .logger_config import get_logger, logger

__all__ = ['SERVICE_NAME', 'LOG_LEVEL', 'get_logger', 'logger']
