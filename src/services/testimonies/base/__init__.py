"""
Base module for testimony services.
Contains common infrastructure and base classes.
"""

from .service_base import BaseService
from .cache_manager import TestimonyCacheManager
from .validators import TestimonyValidator, ValidationError, InvalidTestimonyError

__all__ = [
    'BaseService',
    'TestimonyCacheManager',
    'TestimonyValidator',
    'ValidationError',
    'InvalidTestimonyError',
]
