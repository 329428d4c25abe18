"""
Naming services module.

Contains the template engine, sanitizer, multi-episode handling and the
namer facades.
"""

from src.services.naming.modifier_parser import ModifierParser
from src.services.naming.multi_episode_detector import MultiEpisodeDetector
from src.services.naming.multi_episode_encoder import MultiEpisodeEncoder
from src.services.naming.namers import (
    EpisodeFileNamer,
    MovieFileNamer,
    MovieFolderNamer,
    SeasonFolderNamer,
    SeriesFolderNamer,
)
from src.services.naming.naming_service import NamingService
from src.services.naming.sanitizer import FilenameSanitizer
from src.services.naming.template_renderer import TemplateRenderer, clean_rendered_name
from src.services.naming.template_tokenizer import TemplateTokenizer
from src.services.naming.token_resolver import TokenResolver

__all__ = [
    'TemplateTokenizer',
    'ModifierParser',
    'TokenResolver',
    'TemplateRenderer',
    'clean_rendered_name',
    'FilenameSanitizer',
    'MultiEpisodeEncoder',
    'MultiEpisodeDetector',
    'EpisodeFileNamer',
    'SeriesFolderNamer',
    'SeasonFolderNamer',
    'MovieFileNamer',
    'MovieFolderNamer',
    'NamingService',
]
