"""
Services layer module.

Contains the naming engine services that turn media metadata into names.

Directory structure:
- naming/      : Template rendering, sanitization, multi-episode handling
                 and the namer facades
"""

from src.services.naming.multi_episode_detector import MultiEpisodeDetector
from src.services.naming.multi_episode_encoder import MultiEpisodeEncoder
from src.services.naming.naming_service import NamingService
from src.services.naming.sanitizer import FilenameSanitizer
from src.services.naming.template_renderer import TemplateRenderer

__all__ = [
    'TemplateRenderer',
    'FilenameSanitizer',
    'MultiEpisodeEncoder',
    'MultiEpisodeDetector',
    'NamingService',
]
